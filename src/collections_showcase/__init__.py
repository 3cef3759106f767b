"""Package initialization for collections-showcase.

The pure sequence library lives in `collections_showcase.sequences`; the
named examples in `collections_showcase.examples`. The CLI is available as
`python -m collections_showcase`.
"""

from .errors import EmptyInputError, InvalidArgumentError, ShowcaseError

__version__ = "0.1.0"

__all__ = ["EmptyInputError", "InvalidArgumentError", "ShowcaseError", "__version__"]
