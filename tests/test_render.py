from pathlib import Path

import click

from quasar_cli.api.base import ApiPartsSelection, PropDescriptor, RenderOptions
from quasar_cli.api.loader import parse_api
from quasar_cli.render.describe import render_api, render_prop

FIXTURES = Path(__file__).parent / "fixtures"


def _load(name: str):
    return parse_api(FIXTURES / "api" / f"{name}.json")


def _render(name: str, filter: str | None = None, **flags: bool) -> str:
    options = RenderOptions(parts=ApiPartsSelection.from_flags(**flags), filter=filter)
    return click.unstyle(render_api(_load(name), options, name=name))


def _prop_lines(prop: PropDescriptor, name: str | None = None, indent: int = 0) -> list[str]:
    lines: list[str] = []
    render_prop(lines, prop, name, indent)
    return [click.unstyle(line) for line in lines]


class TestRenderProp:
    def test_named_prop_indents_body(self):
        api = _load("QBtn")
        lines = _prop_lines(api.props["label"], "label", 3)
        assert lines == [
            "   label (String | Number)",
            "     Description: The text that will be shown on the button",
            "     Examples:",
            '       label="Button"',
            '       :label="count"',
        ]

    def test_single_example_header(self):
        lines = _prop_lines(_load("QBtn").props["icon"], "icon", 3)
        assert "     Link: /vue-components/icon" in lines
        assert "     Example:" in lines
        assert "       map" in lines

    def test_values_and_falsy_default(self):
        api = _load("QBtn")
        assert "     Accepted values: xs | sm | md | lg | xl" in _prop_lines(api.props["size"], "size", 3)
        loading = _prop_lines(api.props["loading"], "loading", 3)
        assert loading[0] == "   loading (Boolean) [Reactive]"
        assert not any("Default value" in line for line in loading)

    def test_definition_recurses(self):
        lines = _prop_lines(_load("QBtn").props["ripple"], "ripple", 3)
        assert lines == [
            "   ripple (Boolean | Object)",
            "     Description: Configure material ripple",
            "     Default value: true",
            "     Props:",
            "       early (Boolean)",
            "         Description: Trigger early/immediately on user interaction",
            "       color (String)",
            "         Description: Color name from Quasar Color Palette",
        ]

    def test_required_flag(self):
        lines = _prop_lines(_load("QBtn").props["to"], "to", 3)
        assert lines[0] == "   to (String | Object) [Required]"
        assert "     Default value: '/home'" in lines

    def test_function_is_never_marked_required(self):
        lines = _prop_lines(_load("QBtn").props["on-click"], "on-click", 3)
        assert lines[0] == "   on-click (Function)"
        assert "     Function form: (evt, go) => void 0" in lines
        assert "     Params:" in lines
        assert "       evt (Event)" in lines

    def test_returns_and_nested_params(self):
        go = _load("QBtn").events["click"].params["go"]
        lines = _prop_lines(go, "go", 7)
        assert lines == [
            "       go (Function)",
            "         Description: Navigate to the link",
            "         Function form: (opts) => Promise<any>",
            "         Params:",
            "           opts (Object)",
            "             Description: Navigation options",
            "         Returns Promise<any>:",
            "           Description: A promise that resolves once navigation is done",
        ]

    def test_unnamed_prop(self):
        lines = _prop_lines(PropDescriptor(desc="Just text", sync=True), None, 3)
        assert lines == ["   Description: Just text", '   ".sync" modifier required!']

    def test_scope(self):
        lines = _prop_lines(_load("QBtn").slots["loading"], "loading", 3)
        assert "     Scope:" in lines
        assert "       percentage (Number)" in lines

    def test_empty_examples_prints_header_only(self):
        lines = _prop_lines(PropDescriptor(desc="x", examples=[]))
        assert lines == ["Description: x", "Example:"]


class TestRenderComponent:
    def test_header_and_sections(self):
        output = _render("QBtn")
        assert "Describing QBtn component API" in output
        assert "Description is based on your project's Quasar version" in output
        positions = [
            output.index("quasar.config file > framework > config"),
            output.index("Properties"),
            output.index("Slots"),
            output.index("Events"),
            output.index("Methods"),
        ]
        assert positions == sorted(positions)

    def test_docs_url_always_printed(self):
        output = _render("QBtn", props=True)
        assert "Documentation URL" in output
        assert "https://v2.quasar.dev/vue-components/button" in output

    def test_selection_limits_sections(self):
        output = _render("QBtn", props=True)
        assert "Properties" in output
        assert "Slots" not in output
        assert "Methods" not in output

    def test_events(self):
        output = _render("QBtn", events=True)
        assert "   @click -> function(evt, go)" in output
        assert "   @touchstart -> function()" in output
        assert "     Parameters: *None*" in output

    def test_methods(self):
        output = _render("QBtn", methods=True)
        assert "   click ([evt]) => void 0" in output
        assert "   focus (target [, options]) => Boolean" in output
        assert "     Returns Boolean:" in output

    def test_filter(self):
        output = _render("QBtn", filter="icon")
        assert "   icon (String)" in output
        assert "label (" not in output
        assert "*No matching slots*" in output
        assert "*No matching events*" in output
        assert "*No matching methods*" in output

    def test_filter_does_not_mutate_descriptor(self):
        api = _load("QBtn")
        options = RenderOptions(filter="icon")
        render_api(api, options, name="QBtn")
        assert len(api.props) == 7
        assert set(api.events) == {"click", "touchstart"}

    def test_empty_sections(self):
        output = _render("QSpace")
        assert "*No properties*" in output
        assert "*No slots*" in output
        assert "*No events*" in output
        assert "*No methods*" in output
        assert "*No configurable options*" in output
        assert "Documentation URL" not in output

    def test_empty_section_ignores_filter(self):
        assert "*No properties*" in _render("QSpace", filter="x")

    def test_supplier_line(self):
        options = RenderOptions()
        output = click.unstyle(render_api(_load("QSpace"), options, name="QSpace", supplier="qmarkdown"))
        assert 'Supplied by "qmarkdown" App Extension' in output


class TestRenderDirective:
    def test_sections(self):
        output = _render("TouchPan")
        positions = [
            output.index("quasar.config file"),
            output.index("Value"),
            output.index("Arg"),
            output.index("Modifiers"),
        ]
        assert positions == sorted(positions)
        assert "   Function form: (details) => void 0" in output
        assert "*No arg*" in output
        assert "   prevent (Boolean)" in output
        assert "Properties" not in output

    def test_modifier_filter(self):
        output = _render("TouchPan", filter="zzz", modifiers=True)
        assert "*No matching modifiers*" in output


class TestRenderPlugin:
    def test_sections(self):
        output = _render("LocalStorage")
        positions = [
            output.index("Injection"),
            output.index("quasar.config file > framework > config > localStorage"),
            output.index("Properties"),
            output.index("Methods"),
        ]
        assert positions == sorted(positions)
        assert "   $q.localStorage" in output
        assert "   prefix (String)" in output
        assert "*No properties*" in output
        assert "   getItem (key) => any" in output
        assert "   clear () => void 0" in output

    def test_quasar_conf_filter(self):
        output = _render("LocalStorage", filter="zzz", quasar=True)
        assert "*No matching configurable options*" in output


class TestEmptyScalarSections:
    def test_directive_without_value_or_modifiers(self):
        output = _render("ClosePopup")
        assert "*No value*" in output
        assert "*No modifiers*" in output
        assert "   Description: How many menus deep to close" in output

    def test_plugin_without_injection(self):
        output = _render("Meta")
        assert "*No injection*" in output
        assert "   title (String)" in output

    def test_filter_does_not_apply_to_value_and_arg(self):
        output = _render("TouchPan", filter="zzz")
        assert "   Description: Handler for panning" in output
        assert "*No arg*" in output
        assert "*No matching modifiers*" in output

    def test_filter_does_not_apply_to_injection(self):
        output = _render("LocalStorage", filter="zzz", injection=True)
        assert "   $q.localStorage" in output


class TestDefaultValue:
    def test_empty_object_and_array_defaults_shown(self):
        assert "Default value: {}" in _prop_lines(PropDescriptor(default={}))
        assert "Default value: []" in _prop_lines(PropDescriptor(default=[]))

    def test_falsy_scalars_hidden(self):
        for default in (None, False, 0, ""):
            lines = _prop_lines(PropDescriptor(default=default))
            assert not any("Default value" in line for line in lines)
