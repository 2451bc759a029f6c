import pytest

from react_svg_preview.convert.jsx_to_svg import (
    NormalizeOptions,
    SvgMarkupError,
    camel_to_kebab,
    coerce_expressions,
    complete_dimensions,
    convert_jsx_attr,
    infer_view_box_size,
    jsx_to_svg,
    rename_attributes,
    strip_host_only_attrs,
    strip_non_svg_visual_attrs,
    strip_unresolved_expressions,
    unwrap_wrapper_tags,
)

OPTS = NormalizeOptions()


def test_current_color_uses_default_fill() -> None:
    svg = '<svg viewBox="0 0 24 24"><path fill="currentColor" d="M1 1"/></svg>'
    out = jsx_to_svg(svg, default_fill_color="#123456")
    assert 'fill="#123456"' in out
    assert "currentColor" not in out


def test_bare_svg_gets_default_dimensions() -> None:
    out = jsx_to_svg('<svg><path d="M0 0 L16 16"/></svg>')
    assert 'viewBox="0 0 16 16"' in out
    assert 'width="16" height="16"' in out
    assert 'xmlns="http://www.w3.org/2000/svg"' in out


def test_stroke_linecap_renamed_and_view_box_kept() -> None:
    out = jsx_to_svg('<svg viewBox="0 0 24 24"><path strokeLinecap="round" d="M2 2"/></svg>')
    assert 'stroke-linecap="round"' in out
    assert 'viewBox="0 0 24 24"' in out
    assert "view-box" not in out


@pytest.mark.parametrize(
    "fragment",
    [
        '<svg><path d="M0 0 L16 16"/></svg>',
        '<svg viewBox="0 0 24 24" fill="none"><path fill="currentColor" d="M1 1"/></svg>',
        """<Icon ref={ref} viewBox="0 0 24 24" color={color} fill="none" {...props}>
  <path d={d} fill={props.fill || "#000"} strokeWidth={2} style={{ maskType: 'alpha' }} />
</Icon>""",
        '<Icon viewBox="0 0 20 20"><svg fill={"none"}><path d="M1 1"/></svg></Icon>',
        '<svg width={24} height={24} onClick={() => go()}><use xlinkHref="#a"/></svg>',
    ],
)
def test_normalization_is_idempotent(fragment: str) -> None:
    once = jsx_to_svg(fragment, default_fill_color="#abcdef")
    assert jsx_to_svg(once, default_fill_color="#abcdef") == once


def test_nested_wrapper_is_unwrapped_with_outer_view_box() -> None:
    out = jsx_to_svg('<Icon viewBox="0 0 20 20" {...props}><svg fill="none"><path d="M1 1"/></svg></Icon>')
    assert "Icon" not in out
    assert out.count("<svg") == 1
    assert out.startswith('<svg viewBox="0 0 20 20"')
    assert 'fill="none"' not in out


def test_single_level_wrapper_becomes_svg() -> None:
    out = unwrap_wrapper_tags('<Svg viewBox="0 0 8 8"><rect/></Svg>', OPTS)
    assert out == '<svg viewBox="0 0 8 8"><rect/></svg>'


def test_wrapper_view_box_expression_is_copied() -> None:
    fragment = '<Icon viewBox={"0 0 20 20"}><svg><path d="M1 1"/></svg></Icon>'
    assert unwrap_wrapper_tags(fragment, OPTS) == '<svg viewBox="0 0 20 20"><path d="M1 1"/></svg>'

    out = jsx_to_svg(fragment)
    assert 'viewBox="0 0 20 20"' in out
    assert "0 0 16 16" not in out


def test_inner_view_box_wins_over_wrapper() -> None:
    out = unwrap_wrapper_tags('<Icon viewBox="0 0 20 20"><svg viewBox="0 0 10 10"></svg></Icon>', OPTS)
    assert out == '<svg viewBox="0 0 10 10"></svg>'


def test_ref_and_spread_removed() -> None:
    out = strip_host_only_attrs('<svg ref={svgRef} {...props} {...rest}><g {...groupProps}/></svg>', OPTS)
    assert out == "<svg><g/></svg>"


def test_fill_none_only_removed_from_root() -> None:
    out = strip_non_svg_visual_attrs(
        '<svg fill="none" color="red"><path fill="none" color={c} stroke="red"/></svg>', OPTS
    )
    assert out == '<svg><path fill="none" stroke="red"/></svg>'


def test_expression_coercion() -> None:
    out = coerce_expressions(
        '<path strokeWidth={1.5} fill={"red"} stroke={\'blue\'} style={{ maskType: \'alpha\', fillOpacity: 0.5 }}/>',
        OPTS,
    )
    assert out == '<path strokeWidth="1.5" fill="red" stroke="blue" style="mask-type: alpha; fill-opacity: 0.5"/>'


def test_style_values_with_commas_stay_whole() -> None:
    out = coerce_expressions("<g style={{ backgroundColor: 'rgba(0, 0, 0, 0.5)' }}/>", OPTS)
    assert out == '<g style="background-color: rgba(0, 0, 0, 0.5)"/>'


def test_fallback_expressions_collapse_to_literal() -> None:
    out = coerce_expressions(
        "<path fill={props.fill ? props.fill : '#ff0000'} stroke={props.stroke || \"#00ff00\"} "
        "opacity={opacity ?? 0.8}/>",
        OPTS,
    )
    assert out == '<path fill="#ff0000" stroke="#00ff00" opacity="0.8"/>'


def test_rename_attributes_keeps_view_box() -> None:
    out = rename_attributes(
        '<svg viewBox="0 0 1 1" className="x"><path fillRule="evenodd" maskType="a" xlinkHref="#i"/></svg>', OPTS
    )
    assert out == '<svg viewBox="0 0 1 1" class="x"><path fill-rule="evenodd" mask-type="a" xlink:href="#i"/></svg>'


def test_unresolved_expressions_are_dropped() -> None:
    out = strip_unresolved_expressions('<svg width={size} on-click={() => { go() }}><path d="M1 1"/></svg>', OPTS)
    assert out == '<svg><path d="M1 1"/></svg>'


def test_dimension_hints_used_when_root_has_none() -> None:
    out = jsx_to_svg("<svg><circle cx='4' cy='4' r='2'/></svg>", width=24, height=20)
    assert 'viewBox="0 0 24 20"' in out
    assert 'width="24"' in out
    assert 'height="20"' in out


def test_view_box_hint_beats_inference() -> None:
    out = complete_dimensions('<svg><path d="M0 0 L70 70"/></svg>', NormalizeOptions(view_box="0 0 32 32"))
    assert 'viewBox="0 0 32 32"' in out


def test_explicit_root_dimensions_are_kept() -> None:
    out = complete_dimensions(
        '<svg viewBox="0 0 48 48" width="48" height="48" xmlns="http://www.w3.org/2000/svg"><rect width="2"/></svg>',
        NormalizeOptions(view_box="0 0 1 1"),
    )
    assert out == '<svg viewBox="0 0 48 48" width="48" height="48" xmlns="http://www.w3.org/2000/svg"><rect width="2"/></svg>'


def test_child_width_does_not_count_as_root_width() -> None:
    out = complete_dimensions('<svg viewBox="0 0 8 8"><rect width="2" stroke-width="1"/></svg>', OPTS)
    assert out.startswith('<svg viewBox="0 0 8 8" xmlns="http://www.w3.org/2000/svg" width="16" height="16">')


@pytest.mark.parametrize(
    ("path_data", "expected"),
    [
        ("M0 0 L16 16", 16),
        ("M0 0 L17 2", 24),
        ("M1 1 L30 30", 32),
        ("M1 1 L40 40", 48),
        ("M1 1 L64 64", 64),
        ("M1 1 L70 70", 70),
        ("M1 1 L121.5 3", 130),
        ("M0 0 L20 5000", 24),
    ],
)
def test_infer_view_box_size_buckets(path_data: str, expected: int) -> None:
    assert infer_view_box_size(f'<svg><path d="{path_data}"/></svg>') == expected


def test_infer_view_box_size_ignores_id_attributes() -> None:
    assert infer_view_box_size('<svg><g id="100"/></svg>') is None


def test_fragment_without_svg_root_raises() -> None:
    with pytest.raises(SvgMarkupError):
        jsx_to_svg("<div><span/></div>")


def test_attribute_name_helpers() -> None:
    assert camel_to_kebab("maskType") == "mask-type"
    assert convert_jsx_attr("className") == "class"
    assert convert_jsx_attr("xmlnsXlink") == "xmlns:xlink"
    assert convert_jsx_attr("fill") == "fill"
    assert convert_jsx_attr("viewBox") == "view-box"
