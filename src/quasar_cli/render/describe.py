"""Terminal rendering of component, directive and plugin API descriptors."""

import json
from typing import Any, Callable

import click

from quasar_cli.api.base import (
    ApiDescriptor,
    EventDescriptor,
    MethodDescriptor,
    PropDescriptor,
    RenderOptions,
)
from quasar_cli.api.filter import filter_entries
from quasar_cli.render.signature import (
    event_signature,
    function_form,
    method_signature,
    type_label,
)

SECTION_ORDER = {
    "component": ("quasar", "props", "slots", "events", "methods"),
    "directive": ("quasar", "value", "arg", "modifiers"),
    "plugin": ("injection", "quasar", "props", "methods"),
}


def render_api(
    api: ApiDescriptor,
    options: RenderOptions,
    name: str | None = None,
    supplier: str | None = None,
) -> str:
    """Render the selected parts of `api` as terminal text."""
    lines: list[str] = []
    selected = options.parts.selected
    if name is not None:
        lines.append("")
        lines.append(f" Describing {_green(name)} {api.type} API")
        if supplier is None:
            lines.append(" " + _italic("Description is based on your project's Quasar version"))
        else:
            lines.append(" " + _italic(f'Supplied by "{supplier}" App Extension'))

    for part in SECTION_ORDER[api.type]:
        if part in selected:
            SECTIONS[part](lines, api, options)

    docs_url = api.meta.docs_url if api.meta else None
    if docs_url:
        _header(lines, "Documentation URL")
        lines.append("")
        lines.append("   " + _green(docs_url))

    lines.append("")
    return "\n".join(lines)


def render_prop(
    lines: list[str],
    prop: PropDescriptor,
    name: str | None = None,
    indent: int = 0,
) -> None:
    """Append `prop` and everything nested under it to `lines`."""
    pad = " " * indent
    kind = type_label(prop)

    if name is not None:
        title = _green(name)
        if kind:
            title += f" ({kind})"
        if prop.required and prop.type != "Function":
            title += _red(" [Required]")
        if prop.reactive:
            title += _red(" [Reactive]")
        lines.append(pad + title)
        indent += 2
        pad += "  "

    lines.append(f"{pad}Description: {prop.desc or ''}")

    if prop.type == "Function":
        lines.append(f"{pad}Function form: {function_form(prop)}")
    if prop.sync:
        lines.append(f'{pad}".sync" modifier required!')
    if prop.link:
        lines.append(f"{pad}Link: {prop.link}")
    if prop.values is not None:
        lines.append(f"{pad}Accepted values: {' | '.join(_literal(v) for v in prop.values)}")
    if prop.default not in (None, False, 0, ""):
        lines.append(f"{pad}Default value: {_literal(prop.default)}")

    _render_nested(lines, "Props", prop.definition, indent)
    _render_nested(lines, "Params", prop.params, indent)

    if prop.returns is not None:
        lines.append(f"{pad}Returns {type_label(prop.returns)}:")
        render_prop(lines, prop.returns, None, indent + 2)

    _render_nested(lines, "Scope", prop.scope, indent)

    if prop.examples is not None:
        plural = "s" if len(prop.examples) > 1 else ""
        lines.append(f"{pad}Example{plural}:")
        for example in prop.examples:
            lines.append(f"{pad}  {example}")


def _render_nested(
    lines: list[str],
    title: str,
    entries: dict[str, PropDescriptor] | None,
    indent: int,
) -> None:
    if entries is None:
        return
    lines.append(f"{' ' * indent}{title}:")
    for key, child in entries.items():
        render_prop(lines, child, key, indent + 2)


def _render_collection(
    lines: list[str],
    title: str,
    noun: str,
    entries: dict[str, Any] | None,
    options: RenderOptions,
    render_entry: Callable[[list[str], str, Any], None],
) -> None:
    _header(lines, title)
    if not entries:
        _placeholder(lines, f"*No {noun}*")
        return

    if options.filter:
        entries = filter_entries(entries, options.filter)
        if not entries:
            _placeholder(lines, f"*No matching {noun}*")
            return

    for key, entry in entries.items():
        lines.append("")
        render_entry(lines, key, entry)


def _prop_entry(indent: int) -> Callable[[list[str], str, PropDescriptor], None]:
    def render(lines: list[str], key: str, prop: PropDescriptor) -> None:
        render_prop(lines, prop, key, indent)
    return render


def _event_entry(lines: list[str], key: str, event: EventDescriptor) -> None:
    lines.append(f"   @{_green(key)}{event_signature(event)}")
    lines.append(f"     Description: {event.desc or ''}")
    if not event.params:
        lines.append("     Parameters: " + _italic("*None*"))
        return
    lines.append("     Parameters:")
    for param_name, param in event.params.items():
        render_prop(lines, param, param_name, 7)


def _method_entry(lines: list[str], key: str, method: MethodDescriptor) -> None:
    lines.append(f"   {_green(key)}{method_signature(method)}")
    lines.append(f"     Description: {method.desc or ''}")
    if method.params:
        lines.append("     Parameters:")
        for param_name, param in method.params.items():
            render_prop(lines, param, param_name, 7)
    if method.returns is not None:
        lines.append(f"     Returns {type_label(method.returns)}:")
        render_prop(lines, method.returns, None, 7)


def _render_props(lines: list[str], api: ApiDescriptor, options: RenderOptions) -> None:
    _render_collection(lines, "Properties", "properties", api.props, options, _prop_entry(3))


def _render_slots(lines: list[str], api: ApiDescriptor, options: RenderOptions) -> None:
    _render_collection(lines, "Slots", "slots", api.slots, options, _prop_entry(3))


def _render_events(lines: list[str], api: ApiDescriptor, options: RenderOptions) -> None:
    _render_collection(lines, "Events", "events", api.events, options, _event_entry)


def _render_methods(lines: list[str], api: ApiDescriptor, options: RenderOptions) -> None:
    _render_collection(lines, "Methods", "methods", api.methods, options, _method_entry)


def _render_modifiers(lines: list[str], api: ApiDescriptor, options: RenderOptions) -> None:
    _render_collection(lines, "Modifiers", "modifiers", api.modifiers, options, _prop_entry(3))


def _render_value(lines: list[str], api: ApiDescriptor, options: RenderOptions) -> None:
    _render_scalar(lines, "Value", "value", api.value)


def _render_arg(lines: list[str], api: ApiDescriptor, options: RenderOptions) -> None:
    _render_scalar(lines, "Arg", "arg", api.arg)


def _render_scalar(lines: list[str], title: str, noun: str, prop: PropDescriptor | None) -> None:
    _header(lines, title)
    if prop is None:
        _placeholder(lines, f"*No {noun}*")
        return
    lines.append("")
    render_prop(lines, prop, None, 3)


def _render_injection(lines: list[str], api: ApiDescriptor, options: RenderOptions) -> None:
    _header(lines, "Injection")
    if not api.injection:
        _placeholder(lines, "*No injection*")
        return
    lines.append("")
    lines.append("   " + _green(api.injection))


def _render_quasar_conf(lines: list[str], api: ApiDescriptor, options: RenderOptions) -> None:
    conf = api.quasar_conf_options
    if conf is None or not conf.prop_name:
        _header(lines, "quasar.config file > framework > config")
        _placeholder(lines, "*No configurable options*")
        return

    _render_collection(
        lines,
        f"quasar.config file > framework > config > {conf.prop_name}",
        "configurable options",
        conf.definition,
        options,
        _prop_entry(3),
    )


SECTIONS = {
    "props": _render_props,
    "slots": _render_slots,
    "events": _render_events,
    "methods": _render_methods,
    "value": _render_value,
    "arg": _render_arg,
    "modifiers": _render_modifiers,
    "injection": _render_injection,
    "quasar": _render_quasar_conf,
}


def _header(lines: list[str], title: str) -> None:
    lines.append("")
    lines.append(" " + click.style(title, underline=True))


def _placeholder(lines: list[str], text: str) -> None:
    lines.append("")
    lines.append("   " + _italic(text))


def _literal(value: Any) -> str:
    if isinstance(value, str):
        return value
    return json.dumps(value)


def _green(text: str) -> str:
    return click.style(text, fg="green")


def _red(text: str) -> str:
    return click.style(text, fg="red")


def _italic(text: str) -> str:
    return click.style(text, italic=True)
