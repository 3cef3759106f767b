"""Runnable demonstration sections.

Each section is a function taking the resolved `Settings` and returning the
lines it would print, so the CLI can echo them and tests can assert on them.
`SECTIONS` maps the public section name to its function, in run order.

Sections:
    collections: container kinds, ranges and every named collection example
    advanced-collections: chained transformations, eager vs lazy timing,
        grouping and partitioning people
    delegation: observable, vetoable and compute-once values
    generics: generic box, swapping, runtime type checks
    sealed-classes: exhaustive handling of Result and Shape variants
    inline-values: typed integer IDs
    dsl-builders: nested HTML builder
    reflection: type and callable descriptions
"""
from __future__ import annotations

import logging
from typing import Callable, Dict, Iterable, List, Optional

from . import examples
from .config import Settings
from .errors import InvalidArgumentError
from .features.builder import html
from .features.calculator import Calculator
from .features.delegation import ExpensiveResource, Observable, Vetoable
from .features.generics import Box, is_of_type, swapped, type_name
from .features.inspection import describe_callable, inspect_type
from .features.timing import measure_millis
from .models.person import Person, sample_people
from .models.variants import (
    Circle,
    Failure,
    Loading,
    ProductId,
    Rectangle,
    Success,
    UserId,
    describe_result,
    describe_shape,
    process_product,
    process_user,
)
from .sequences import containers
from .sequences import operations as ops
from .sequences.lazy import LazyPipeline, chained_even_squares, squares_sequence

logger = logging.getLogger(__name__)

__all__ = ["SECTIONS", "section_names", "run_sections"]

SectionFn = Callable[[Settings], List[str]]


def demonstrate_collections(settings: Settings) -> List[str]:
    numbers = [1, 2, 3, 4, 5, 6, 7]
    chunked, windowed = examples.chunked_windowed(
        numbers,
        chunk_size=settings.CHUNK_SIZE,
        window_size=settings.WINDOW_SIZE,
        window_step=settings.WINDOW_STEP,
        allow_partial=settings.WINDOW_PARTIAL,
    )
    taken, dropped = examples.take_drop([1, 2, 3, 4, 5], n=settings.TAKE_COUNT)
    original = [1, 2, 3]
    appended = examples.add_to_list(original, 9)
    return [
        "=== Collections ===",
        f"Immutable list: {containers.immutable_list()}",
        f"Immutable set: {sorted(containers.immutable_set())}",
        f"Immutable map: {dict(containers.immutable_map())}",
        f"Int array: {containers.int_array().tolist()}",
        f"Ranges: {list(containers.int_range_inclusive())} {list(containers.int_range_exclusive())} "
        f"{list(containers.int_range_step())} {containers.char_range('a', 'e')}",
        f"Pair and triple: {containers.pair_and_triple()}",
        f"Squares (lazy): {squares_sequence(5)}",
        f"Map/filter: {examples.map_filter([1, 2, 3, 4])}",
        f"Reduce sum: {examples.reduce_sum([1, 2, 3, 4, 5])}",
        f"Fold product: {examples.fold_product([1, 2, 3, 4, 5])}",
        f"Group by parity: {examples.group_by_parity([1, 2, 3, 4, 5])}",
        f"Associate by length: {examples.associate_by_length(['a', 'bb', 'cc', 'ddd'])}",
        f"Zip: {examples.zip_lists([1, 2, 3], ['a', 'b', 'c'])}",
        f"Flatten: {examples.flatten_lists([[1, 2, 3], [4, 5, 6]])}",
        f"Tokens: {examples.flat_map_tokens(['hello world', 'kotlin  collections'])}",
        f"Distinct sorted: {examples.distinct_sorted([3, 1, 2, 3, 4, 2])}",
        f"Take/drop({settings.TAKE_COUNT}): {taken} / {dropped}",
        f"Chunked({settings.CHUNK_SIZE}): {chunked}",
        f"Windowed({settings.WINDOW_SIZE}, step={settings.WINDOW_STEP}): {windowed}",
        f"Copy-insert: {appended} (original still {original})",
    ]


def demonstrate_advanced_collections(settings: Settings) -> List[str]:
    lines = ["=== Advanced Collections and Functional Programming ==="]
    lines.append(f"Chained operations: {chained_even_squares(range(1, 11))}")

    large = range(1, settings.LARGE_INPUT_SIZE + 1)

    def _eager() -> List[int]:
        evens = [n for n in large if n % 2 == 0]
        squares = [n * n for n in evens]
        return ops.take([sq for sq in squares if sq > 1000], 10)

    def _lazy() -> List[int]:
        return (
            LazyPipeline(large)
            .filter(lambda n: n % 2 == 0)
            .map(lambda n: n * n)
            .filter(lambda sq: sq > 1000)
            .take(10)
            .to_list()
        )

    eager_result, eager_ms = measure_millis(_eager)
    lazy_result, lazy_ms = measure_millis(_lazy)
    logger.info("eager=%.2fms lazy=%.2fms over %d elements", eager_ms, lazy_ms, len(large))
    lines.append(f"Collection result: {eager_result}")
    lines.append(f"Sequence result: {lazy_result}")
    lines.append(f"Collection time: {eager_ms:.2f}ms")
    lines.append(f"Sequence time: {lazy_ms:.2f}ms")

    people = sample_people()
    by_department = ops.group_by(people, lambda p: p.department)
    adults, minors = ops.partition(people, lambda p: p.age >= 18)
    grouped = {dept: [p.name for p in members] for dept, members in by_department.items()}
    lines.append(f"Grouped by department: {grouped}")
    lines.append(f"Adults: {len(adults)}, Minors: {len(minors)}")
    return lines


def demonstrate_delegation(settings: Settings) -> List[str]:
    lines = ["=== Delegation Patterns ==="]
    resource = ExpensiveResource()
    lines.append("Resource created")
    lines.append(f"Accessing expensive value: {resource.expensive_value}")
    lines.append(f"Accessing again: {resource.expensive_value} (computed {resource.compute_count}x)")

    name = Observable("Unknown", lambda old, new: lines.append(f"Name changed from '{old}' to '{new}'"))
    age = Observable(0, lambda old, new: lines.append(f"Age changed from {old} to {new}"))
    name.set("Alice")
    age.set(25)

    balance = Vetoable(0, lambda old, new: new >= 0)
    for amount in (100, -50):
        if balance.set(amount):
            lines.append(f"Balance changed to {amount}")
        else:
            lines.append(f"Invalid balance: {amount} (cannot be negative)")
    lines.append(f"Final balance: {balance.get()}")
    return lines


def demonstrate_generics(settings: Settings) -> List[str]:
    string_box = Box("Hello")
    int_box = Box(42)
    return [
        "=== Generics and Type Safety ===",
        f"String box: {string_box.get()}",
        f"Int box: {int_box.get()}",
        f"Swapped numbers: {swapped([1, 2, 3, 4, 5], 0, 4)}",
        f"Second / penultimate: {ops.second([1, 2, 3, 4])} / {ops.penultimate([1, 2, 3, 4])}",
        f"Is 'Hello' a str? {is_of_type('Hello', str)}",
        f"Is 42 a str? {is_of_type(42, str)}",
        f"Type name of str: {type_name(str)}",
        f"Type name of int: {type_name(int)}",
    ]


def demonstrate_sealed_classes(settings: Settings) -> List[str]:
    lines = ["=== Sealed Classes and Pattern Matching ==="]
    for result in (Success(value="Hello World"), Failure(message="Something went wrong"), Loading()):
        lines.append(describe_result(result))
    for shape in (Circle(radius=5.0), Rectangle(width=4.0, height=6.0)):
        lines.extend(describe_shape(shape))
    return lines


def demonstrate_inline_values(settings: Settings) -> List[str]:
    calculator = Calculator()
    return [
        "=== Inline Values ===",
        process_user(UserId(123)),
        process_product(ProductId(456)),
        f"Calculator: 15 / 3 = {calculator.divide(15, 3)}, 2 ** 3 = {calculator.power(2, 3)}",
    ]


def demonstrate_dsl_builders(settings: Settings) -> List[str]:
    with html() as page:
        with page.head() as head:
            head.title("My Page")
        with page.body() as body:
            body.h1("Welcome")
            body.p("This is a paragraph")
    return ["=== DSL Builders ===", "Generated HTML:", str(page)]


def demonstrate_reflection(settings: Settings) -> List[str]:
    person = Person(name="Alice", age=25, department="Engineering")
    described = inspect_type(person)
    text = inspect_type("text")
    fn = describe_callable(process_user)
    return [
        "=== Reflection ===",
        f"str class name: {text.simple_name}",
        f"str is data model: {text.is_data_model}",
        f"Function name: {fn.name}",
        f"Function parameters: {fn.parameters}",
        f"Function return type: {fn.return_type}",
        f"Person: Type: {described.simple_name}, Is data model: {described.is_data_model}, "
        f"Is variant: {described.is_variant}, Fields: {described.fields}",
    ]


SECTIONS: Dict[str, SectionFn] = {
    "collections": demonstrate_collections,
    "advanced-collections": demonstrate_advanced_collections,
    "delegation": demonstrate_delegation,
    "generics": demonstrate_generics,
    "sealed-classes": demonstrate_sealed_classes,
    "inline-values": demonstrate_inline_values,
    "dsl-builders": demonstrate_dsl_builders,
    "reflection": demonstrate_reflection,
}


def section_names() -> List[str]:
    return list(SECTIONS)


def run_sections(names: Optional[Iterable[str]], settings: Settings) -> List[str]:
    """Run the named sections in the given order (all sections when empty).

    Raises:
        InvalidArgumentError: a name is not a known section. Nothing runs in
            that case.
    """
    selected = list(names or []) or section_names()
    unknown = [n for n in selected if n not in SECTIONS]
    if unknown:
        raise InvalidArgumentError(
            f"Unknown section(s): {', '.join(unknown)}. Available: {', '.join(section_names())}"
        )
    lines: List[str] = []
    for name in selected:
        logger.debug("Running section %s", name)
        lines.extend(SECTIONS[name](settings))
    return lines
