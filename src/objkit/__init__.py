"""objkit: rectangle values, a JSON capability bridge and a CSS selector builder."""

from objkit.config import ObjkitConfig
from objkit.errors import (
    DuplicateError,
    ObjkitError,
    OrderError,
    ParseError,
    SelectorError,
)
from objkit.jsonbridge import (
    Reattached,
    capabilities_of,
    from_json_text,
    to_json_text,
    unwrap,
)
from objkit.rectangle import Rectangle, create_rectangle
from objkit.selector import (
    Category,
    Combinator,
    CssSelectorBuilder,
    SelectorBuilder,
    css_selector_builder,
)

__version__ = "0.1.0"

__all__ = [
    "__version__",
    # config
    "ObjkitConfig",
    # errors
    "ObjkitError",
    "SelectorError",
    "DuplicateError",
    "OrderError",
    "ParseError",
    # rectangle
    "Rectangle",
    "create_rectangle",
    # json bridge
    "Reattached",
    "to_json_text",
    "from_json_text",
    "unwrap",
    "capabilities_of",
    # selector
    "Category",
    "Combinator",
    "CssSelectorBuilder",
    "SelectorBuilder",
    "css_selector_builder",
]
