"""One-line signatures for props, events and methods."""

from quasar_cli.api.base import EventDescriptor, MethodDescriptor, PropDescriptor


def type_label(node: PropDescriptor) -> str:
    """Union types are joined with ' | '."""
    if isinstance(node.type, list):
        return " | ".join(node.type)
    return node.type or ""


def return_label(returns: PropDescriptor | None) -> str:
    if returns is None or not returns.type:
        return "void 0"
    return type_label(returns)


def function_form(prop: PropDescriptor) -> str:
    params = ", ".join(prop.params or {})
    return f"({params}) => {return_label(prop.returns)}"


def event_params(event: EventDescriptor) -> str:
    return f"function({', '.join(event.params or {})})"


def event_signature(event: EventDescriptor) -> str:
    return f" -> {event_params(event)}"


def method_params(method: MethodDescriptor) -> str:
    """Parameter list with everything from the first optional param on in brackets.

    Required params that follow an optional one still land inside the
    bracket group.
    """
    params = method.params or {}
    names = list(params)
    if not names:
        return "()"

    optional_index = next(
        (i for i, name in enumerate(names) if not params[name].required),
        None,
    )
    if optional_index is None:
        return f"({', '.join(names)})"

    required = ", ".join(names[:optional_index])
    optional = ", ".join(names[optional_index:])
    if required:
        return f"({required} [, {optional}])"
    return f"([{optional}])"


def method_signature(method: MethodDescriptor) -> str:
    return f" {method_params(method)} => {return_label(method.returns)}"
