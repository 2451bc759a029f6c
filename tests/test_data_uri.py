import base64
from urllib.parse import unquote

from react_svg_preview.convert.data_uri import placeholder_svg, svg_to_base64_data_uri, svg_to_data_uri

SVG = '<svg xmlns="http://www.w3.org/2000/svg" width="16" height="16"><path d=\'M0 0\'/></svg>'


def test_data_uri_is_attribute_safe() -> None:
    uri = svg_to_data_uri(SVG)
    assert uri.startswith("data:image/svg+xml,")
    body = uri.split(",", 1)[1]
    for ch in "<>\"' #":
        assert ch not in body
    assert unquote(body) == SVG


def test_base64_data_uri() -> None:
    uri = svg_to_base64_data_uri(SVG)
    prefix = "data:image/svg+xml;base64,"
    assert uri.startswith(prefix)
    assert base64.b64decode(uri[len(prefix) :]).decode("utf-8") == SVG


def test_placeholder_svg_size() -> None:
    svg = placeholder_svg(24)
    assert 'width="24" height="24" viewBox="0 0 24 24"' in svg
    assert svg.endswith("</svg>")
