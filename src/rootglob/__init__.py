# Package initialization for rootglob.
# Only the version and the public entry points are exposed here;
# everything else is imported from its submodule.

from rootglob.errors import AbsolutePathRequired, GlobError, ParseError
from rootglob.models import MatchType
from rootglob.traverse import GlobMatches, list_files

__all__ = [
    "AbsolutePathRequired",
    "GlobError",
    "GlobMatches",
    "MatchType",
    "ParseError",
    "__version__",
    "list_files",
]

# Package version.
# This is duplicated in pyproject.toml; keep them in sync.
__version__ = "0.1.0"
