"""Compile one operation into an Angular HttpClient call.

The compiled method takes a single typed ``params`` object, splits it by
parameter location into the pieces HttpClient expects (URL interpolation,
HttpParams, HttpHeaders, request body) and returns the client call.
"""

from __future__ import annotations

import re
from typing import Callable, Mapping, Sequence

from . import conf
from .model import MethodCode, MethodDescriptor, ParameterDescriptor, ProcessedParams
from .naming import property_access, property_key, upper_first
from .params import process_params
from .utils import indent, make_comment

_PATH_PARAM_RE = re.compile(r"\{([^}]+)\}")

_QUERY_FILTER = """\
let queryParams = new HttpParams();
Object.entries(queryParamBase).forEach(([key, value]: [string, any]) => {
  if (value !== undefined) {
    if (typeof value === 'string') queryParams = queryParams.set(key, value);
    else queryParams = queryParams.set(key, JSON.stringify(value));
  }
});"""

_BODY_FILTER = """\
const bodyParamsWithoutUndefined: any = {};
Object.entries(bodyParams).forEach(([key, value]: [string, any]) => {
  if (value !== undefined) bodyParamsWithoutUndefined[key] = value;
});"""

ParamsCompiler = Callable[[Sequence[ParameterDescriptor], str], ProcessedParams]


def object_props(names: Sequence[str]) -> list[str]:
    """``key: params.key,`` lines, quoting both sides for non-identifiers."""
    return [f"{property_key(name)}: {property_access('params', name)}," for name in names]


def object_literal(names: Sequence[str]) -> str:
    return "{\n" + indent(object_props(names)) + "\n}"


def interpolate_url(url: str) -> str:
    """Rewrite ``{name}`` placeholders into ``${params.name}`` interpolations."""
    return _PATH_PARAM_RE.sub(lambda m: "${" + property_access("params", m.group(1)) + "}", url)


def group_params(
    param_def: Sequence[ParameterDescriptor],
    allowed: Sequence[str],
) -> dict[str, list[ParameterDescriptor]]:
    """Drop disallowed locations and group the rest by location, first seen first."""
    groups: dict[str, list[ParameterDescriptor]] = {}
    for param in param_def:
        if param.location not in allowed:
            continue
        groups.setdefault(param.location, []).append(param)
    return groups


def _unique_names(group: Sequence[ParameterDescriptor]) -> list[str]:
    names: list[str] = []
    for param in group:
        if param.name not in names:
            names.append(param.name)
    return names


def body_argument(group: Sequence[ParameterDescriptor]) -> str:
    """Value sent as the request body for a ``body`` group."""
    if group[0].schema is not None:
        return property_access("params", group[0].name)
    return "bodyParamsWithoutUndefined"


def marshal_group(location: str, group: Sequence[ParameterDescriptor]) -> str:
    """Statements that turn one location group into an HttpClient argument.

    Path parameters produce nothing; they are interpolated into the URL.
    """
    names = _unique_names(group)

    if location == "path":
        return ""

    if location == "query":
        return f"const queryParamBase = {object_literal(names)};\n\n{_QUERY_FILTER}"

    if location == "header":
        return f"const headerParams = new HttpHeaders({object_literal(names)});"

    if location == "body":
        # A model-typed body parameter is passed through untouched
        if group[0].schema is not None:
            return ""
        return f"const bodyParams = {object_literal(names)};\n{_BODY_FILTER}"

    return f"const {location}Params = {object_literal(names)};"


def request_arguments(
    param_groups: Mapping[str, Sequence[ParameterDescriptor]],
    method_name: str,
    body_sources: Mapping[str, Sequence[str]] = conf.BODY_SOURCES,
) -> list[str]:
    """Arguments following the URL in the HttpClient call."""
    args: list[str] = []

    if method_name in body_sources:
        body = "{}"
        for source in body_sources[method_name]:
            if source not in param_groups:
                continue
            if source == "body":
                body = body_argument(param_groups["body"])
            else:
                body = f"{source}Params"
            break
        args.append(body)

    options = []
    if "query" in param_groups:
        options.append("params: queryParams")
    if "header" in param_groups:
        options.append("headers: headerParams")
    if options:
        args.append("{" + ", ".join(options) + "}")

    return args


class MethodCompiler:
    """Turns MethodDescriptors into MethodCode.

    The allowed-location table is fixed at construction, so compiling is a
    pure function of the descriptor.
    """

    def __init__(
        self,
        allowed_params: Mapping[str, Sequence[str]] = conf.ALLOWED_PARAMS,
        unwrap_single_param_methods: bool = False,
        params_compiler: ParamsCompiler = process_params,
        body_sources: Mapping[str, Sequence[str]] = conf.BODY_SOURCES,
    ) -> None:
        self.allowed_params = allowed_params
        self.unwrap_single_param_methods = unwrap_single_param_methods
        self.params_compiler = params_compiler
        self.body_sources = body_sources

    def compile(self, method: MethodDescriptor) -> MethodCode:
        response_type = method.response_def.type
        param_groups: dict[str, list[ParameterDescriptor]] = {}
        signature = ""
        interface_def = ""
        uses_global_type = False
        statements: list[str] = []
        unwrapped = ""

        if method.param_def is not None:
            allowed = self.allowed_params.get(method.method_name, ())
            retained = [p for p in method.param_def if p.location in allowed]
            param_groups = group_params(retained, allowed)

            params_type = upper_first(f"{method.simple_name}Params")
            processed = self.params_compiler(retained, params_type)
            uses_global_type = processed.uses_global_type

            if not processed.is_interface_empty:
                signature = f"params: {params_type}"
                interface_def = processed.param_def

            statements = [
                stmt for stmt in (marshal_group(loc, group) for loc, group in param_groups.items())
                if stmt
            ]

            if (
                self.unwrap_single_param_methods
                and len(retained) == 1
                and processed.types_only
            ):
                unwrapped = self._unwrapped_method(method, processed, retained)

        args = request_arguments(param_groups, method.method_name, self.body_sources)
        url = f"`{method.base_path}{interpolate_url(method.url)}`"
        call = f"return this.http.{method.method_name}<{response_type}>({', '.join([url, *args])});"

        method_def = "\n"
        method_def += make_comment([method.summary, method.description, method.swagger_url])
        method_def += f"{method.simple_name}({signature}): Observable<{response_type}> {{\n"
        if statements:
            method_def += indent("\n\n".join(statements)) + "\n\n"
        method_def += indent(call) + "\n"
        method_def += "}\n"
        method_def += unwrapped

        enum_declaration = method.response_def.enum_declaration
        if enum_declaration:
            interface_def = f"{interface_def}\n\n{enum_declaration}" if interface_def else enum_declaration

        return MethodCode(
            method_def=method_def,
            interface_def=interface_def,
            uses_global_type=uses_global_type,
            param_groups=param_groups,
            response_def=method.response_def,
            simple_name=method.simple_name,
            method_name=method.method_name,
        )

    def _unwrapped_method(
        self,
        method: MethodDescriptor,
        processed: ProcessedParams,
        retained: Sequence[ParameterDescriptor],
    ) -> str:
        """Overload taking the scalar fields as positional arguments."""
        response_type = method.response_def.type
        arguments = ", ".join(processed.types_only)
        wrapped = "{" + ", ".join(p.name for p in retained) + "}"
        return (
            f"\n{method.simple_name}_({arguments}): Observable<{response_type}> {{\n"
            + indent(f"return this.{method.simple_name}({wrapped});") + "\n"
            + "}\n"
        )
