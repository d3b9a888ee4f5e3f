from pathlib import Path
from typing import Mapping, Any

from jinja2 import Environment, FileSystemLoader, select_autoescape

from storefront.web.jinja_filters import format_percent, format_price

# storefront/
#   templates.py  (dit bestand)
#   templates/
#     emails/order_confirmation.html

TEMPLATES_DIR = Path(__file__).resolve().parent / "templates"

_env = Environment(
    loader=FileSystemLoader(str(TEMPLATES_DIR)),
    autoescape=select_autoescape(["html", "xml"]),
)
_env.filters["price"] = format_price
_env.filters["percent"] = format_percent


def render_template(name: str, context: Mapping[str, Any]) -> str:
    """
    Render een Jinja2-template naar een HTML-string.

    Voorbeeld:
        html = render_template("emails/order_confirmation.html", {"order": order})
    """
    template = _env.get_template(name)
    return template.render(**context)
