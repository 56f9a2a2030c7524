# SPDX-License-Identifier: AGPL-3.0-or-later
# Copyright (C) 2026 Custodia Authors

"""
Custodia Python SDK - binding generator

Reads the public API swagger document and writes two modules:

    custodia/_generated/sdk_api_types.py    TypedDicts + per-operation aliases
    custodia/_generated/sdk_client_base.py  SdkClientBase, one coroutine per operation

Usage:
    custodia-codegen
    custodia-codegen --input public_api.swagger.json --output-dir ./out

Versioned schemas (v1CreateSubOrganizationResult, ...ResultV4, ...ResultV5)
are collapsed into the latest one before bindings are emitted, so each
client method keeps its name while reading the newest result key.
"""

import argparse
import json
import keyword
import logging
import re
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any, Dict, FrozenSet, List, Optional

from .client import CustodiaError

logger = logging.getLogger(__name__)


# -----------------------------------------------------------------------------
# Constants
# -----------------------------------------------------------------------------

PACKAGE_DIR = Path(__file__).resolve().parent
DEFAULT_INPUT_PATH = PACKAGE_DIR / "_inputs" / "public_api.swagger.json"
DEFAULT_OUTPUT_DIR = PACKAGE_DIR / "_generated"
API_TYPES_FILENAME = "sdk_api_types.py"
CLIENT_BASE_FILENAME = "sdk_client_base.py"

GENERATED_HEADER = (
    "# SPDX-License-Identifier: AGPL-3.0-or-later\n"
    "# Copyright (C) 2026 Custodia Authors\n"
    "\n"
    "# @generated by custodia-codegen. DO NOT EDIT BY HAND"
)

CODEGEN_ANCHOR = "NOOPCodegenAnchor"
ACTIVITY_DECISION_METHODS = ("approveActivity", "rejectActivity")
NOOP_PREFIX = "nOOP"
QUERY_PREFIXES = ("get", "list")
RESULT_SUFFIX = "Result"
ACTIVITY_TYPE_PREFIX = "ACTIVITY_TYPE_"

# Server-side revisions of activity types whose client method kept its name
VERSIONED_ACTIVITY_TYPES = {
    "ACTIVITY_TYPE_CREATE_AUTHENTICATORS": "ACTIVITY_TYPE_CREATE_AUTHENTICATORS_V2",
    "ACTIVITY_TYPE_CREATE_POLICY": "ACTIVITY_TYPE_CREATE_POLICY_V3",
    "ACTIVITY_TYPE_CREATE_PRIVATE_KEYS": "ACTIVITY_TYPE_CREATE_PRIVATE_KEYS_V2",
    "ACTIVITY_TYPE_CREATE_SUB_ORGANIZATION": "ACTIVITY_TYPE_CREATE_SUB_ORGANIZATION_V5",
    "ACTIVITY_TYPE_CREATE_USERS": "ACTIVITY_TYPE_CREATE_USERS_V2",
    "ACTIVITY_TYPE_SIGN_RAW_PAYLOAD": "ACTIVITY_TYPE_SIGN_RAW_PAYLOAD_V2",
    "ACTIVITY_TYPE_SIGN_TRANSACTION": "ACTIVITY_TYPE_SIGN_TRANSACTION_V2",
}

# Namespace prefix, base entity name, optional version suffix
VERSIONED_NAME_RE = re.compile(r"^(v\d+)([A-Z][a-z]+(?:[A-Z][a-z]+)*)(V\d+)?$")
NAMESPACE_PREFIX_RE = re.compile(r"^v\d+")


# -----------------------------------------------------------------------------
# Exceptions
# -----------------------------------------------------------------------------

class GenerationError(CustodiaError):
    """The API description cannot be turned into bindings"""
    pass


# -----------------------------------------------------------------------------
# Types
# -----------------------------------------------------------------------------

class OperationKind(Enum):
    QUERY = "query"
    COMMAND = "command"
    ACTIVITY_DECISION = "activityDecision"
    NOOP = "noop"


@dataclass(frozen=True)
class VersionedEntity:
    """One schema definition split into base name and version suffix"""
    base_name: str
    version_suffix: Optional[str]
    full_name: str
    formatted_key_name: str  # key inside activity.result, e.g. "createWalletResultV2"


@dataclass(frozen=True)
class OperationDescriptor:
    """One POST operation of the API description"""
    operation_id: str
    http_path: str
    parameter_locations: FrozenSet[str]
    response_schema_ref: Optional[str] = None
    body_schema_ref: Optional[str] = None


@dataclass(frozen=True)
class Binding:
    """Everything needed to emit one typed client method"""
    operation_name: str  # "CreateWallet"
    wire_name: str       # "createWallet"
    method_name: str     # "create_wallet"
    http_path: str
    kind: OperationKind
    result_key: Optional[str] = None
    activity_type: Optional[str] = None
    input_optional: bool = False
    body_schema_ref: Optional[str] = None
    response_schema_ref: Optional[str] = None

    @property
    def body_type(self) -> str:
        return f"{self.operation_name}Body"

    @property
    def response_type(self) -> str:
        return f"{self.operation_name}Response"


# -----------------------------------------------------------------------------
# Naming
# -----------------------------------------------------------------------------

def operation_kind(method_name: str) -> OperationKind:
    """Classify an operation by its camelCase method name."""
    if method_name in ACTIVITY_DECISION_METHODS:
        return OperationKind.ACTIVITY_DECISION
    if method_name.startswith(NOOP_PREFIX):
        return OperationKind.NOOP
    if method_name.startswith(QUERY_PREFIXES):
        return OperationKind.QUERY
    return OperationKind.COMMAND


def lower_first(name: str) -> str:
    return name[:1].lower() + name[1:]


def snake_case(name: str) -> str:
    return re.sub(r"([a-z0-9])([A-Z])", r"\1_\2", name).lower()


def activity_type_for(operation_name: str) -> str:
    """
    Wire activity type for a command or decision.

    CreateSubOrganization -> ACTIVITY_TYPE_CREATE_SUB_ORGANIZATION, then
    swapped for the newer revision when one is registered.
    """
    unversioned = ACTIVITY_TYPE_PREFIX + re.sub(r"([a-z])([A-Z])", r"\1_\2", operation_name).upper()
    return VERSIONED_ACTIVITY_TYPES.get(unversioned, unversioned)


def ref_name(ref: Optional[str]) -> Optional[str]:
    """'#/definitions/v1Wallet' -> 'v1Wallet'"""
    if not ref:
        return None
    return ref.rsplit("/", 1)[-1]


def type_name(definition_name: str) -> str:
    """Python class name for a definition: namespace prefix dropped."""
    name = NAMESPACE_PREFIX_RE.sub("", definition_name) or definition_name
    name = re.sub(r"\W", "_", name)
    name = name[:1].upper() + name[1:]
    if not name.isidentifier() or keyword.iskeyword(name):
        name = f"T{name}"
    return name


def api_namespace(api_description: Dict[str, Any]) -> Optional[str]:
    for tag in api_description.get("tags") or []:
        if tag.get("name") is not None:
            return tag["name"]
    return None


def operation_name(operation_id: str, namespace: Optional[str]) -> str:
    """'PublicApiService_CreateWallet' -> 'CreateWallet'"""
    if namespace and operation_id.startswith(f"{namespace}_"):
        return operation_id[len(namespace) + 1:]
    return operation_id


# -----------------------------------------------------------------------------
# Schema Reconciler
# -----------------------------------------------------------------------------

def reconcile(definitions: Dict[str, Any]) -> Dict[str, VersionedEntity]:
    """
    Keep only the latest version of every versioned definition.

    v1CreateWidgetResult and v1CreateWidgetResultV2 both reduce to base
    name CreateWidgetResult; the V2 entry survives. Suffixes compare as
    strings and a missing suffix is lowest. When two candidates compare
    equal the one seen last in iteration order wins.

    Args:
        definitions: swagger "definitions" mapping (values are not read)

    Returns:
        base name -> surviving VersionedEntity
    """
    latest: Dict[str, VersionedEntity] = {}

    for full_name in definitions:
        match = VERSIONED_NAME_RE.match(full_name)
        if not match:
            logger.debug(f"Skipping unversionable definition {full_name}")
            continue

        base_name = match.group(2)
        version_suffix = match.group(3)
        candidate = VersionedEntity(
            base_name=base_name,
            version_suffix=version_suffix,
            full_name=full_name,
            formatted_key_name=lower_first(base_name) + (version_suffix or ""),
        )

        current = latest.get(base_name)
        if current is None or (version_suffix or "") >= (current.version_suffix or ""):
            latest[base_name] = candidate

    return latest


# -----------------------------------------------------------------------------
# Binding Generator
# -----------------------------------------------------------------------------

def describe_operations(api_description: Dict[str, Any]) -> List[OperationDescriptor]:
    """One descriptor per POST operation, in document order."""
    descriptors = []
    for path, method_map in (api_description.get("paths") or {}).items():
        operation = method_map.get("post")
        if operation is None:
            continue
        if "operationId" not in operation:
            raise GenerationError(f"Operation at {path} has no operationId")

        parameters = operation.get("parameters") or []
        body_ref = None
        for param in parameters:
            if param.get("in") == "body":
                body_ref = ref_name((param.get("schema") or {}).get("$ref"))

        response = (operation.get("responses") or {}).get("200")
        response_ref = None
        if response is not None:
            response_ref = ref_name((response.get("schema") or {}).get("$ref"))

        descriptors.append(OperationDescriptor(
            operation_id=operation["operationId"],
            http_path=path,
            parameter_locations=frozenset(
                p["in"] for p in parameters if p.get("in") in ("body", "query", "path")
            ),
            response_schema_ref=response_ref,
            body_schema_ref=body_ref,
        ))
    return descriptors


def _has_only_optional_parameters(
    descriptor: OperationDescriptor,
    definitions: Dict[str, Any],
) -> bool:
    if "body" not in descriptor.parameter_locations or descriptor.body_schema_ref is None:
        return True
    schema = definitions.get(descriptor.body_schema_ref) or {}
    required = set(schema.get("required") or []) - {"organizationId"}
    return not required


def generate(
    api_description: Dict[str, Any],
    reconciled: Dict[str, VersionedEntity],
) -> List[Binding]:
    """
    Build one Binding per operation of the API description.

    Args:
        api_description: parsed swagger document
        reconciled: output of reconcile() over its definitions

    Returns:
        Bindings in document order

    Raises:
        GenerationError: If a command or decision has no result definition,
            or two operations map to the same method name
    """
    namespace = api_namespace(api_description)
    definitions = api_description.get("definitions") or {}

    bindings = []
    seen: Dict[str, str] = {}
    for descriptor in describe_operations(api_description):
        name = operation_name(descriptor.operation_id, namespace)
        if name == CODEGEN_ANCHOR:
            continue

        wire_name = lower_first(name)
        kind = operation_kind(wire_name)

        result_key = None
        activity_type = None
        if kind in (OperationKind.COMMAND, OperationKind.ACTIVITY_DECISION):
            entity = reconciled.get(name + RESULT_SUFFIX)
            if entity is None:
                raise GenerationError(
                    f"No result definition for {descriptor.operation_id} "
                    f"(expected {name}{RESULT_SUFFIX})"
                )
            result_key = entity.formatted_key_name
            activity_type = activity_type_for(name)

        method_name = snake_case(wire_name)
        if method_name in seen:
            raise GenerationError(
                f"{descriptor.operation_id} and {seen[method_name]} "
                f"both map to method {method_name}"
            )
        seen[method_name] = descriptor.operation_id

        bindings.append(Binding(
            operation_name=name,
            wire_name=wire_name,
            method_name=method_name,
            http_path=descriptor.http_path,
            kind=kind,
            result_key=result_key,
            activity_type=activity_type,
            input_optional=(
                kind == OperationKind.QUERY
                and _has_only_optional_parameters(descriptor, definitions)
            ),
            body_schema_ref=descriptor.body_schema_ref,
            response_schema_ref=descriptor.response_schema_ref,
        ))

    return bindings


# -----------------------------------------------------------------------------
# Rendering: sdk_api_types.py
# -----------------------------------------------------------------------------

API_TYPES_PRELUDE = '''from __future__ import annotations

from typing import Any, Dict, List, Literal, TypedDict


class ActivityMetadataInfo(TypedDict):
    id: str
    status: str


class ActivityMetadata(TypedDict):
    activity: ActivityMetadataInfo


class CommandOverrideParams(TypedDict, total=False):
    organizationId: str
    timestampMs: str'''


def _python_type(schema: Dict[str, Any], definitions: Dict[str, Any]) -> str:
    ref = ref_name(schema.get("$ref"))
    if ref is not None:
        if ref not in definitions:
            raise GenerationError(f"Unresolved reference {schema['$ref']}")
        return type_name(ref)

    schema_type = schema.get("type")
    if schema_type == "string":
        return "str"
    if schema_type == "integer":
        return "int"
    if schema_type == "number":
        return "float"
    if schema_type == "boolean":
        return "bool"
    if schema_type == "array":
        return f"List[{_python_type(schema.get('items') or {}, definitions)}]"
    if schema_type == "object" and isinstance(schema.get("additionalProperties"), dict):
        return f"Dict[str, {_python_type(schema['additionalProperties'], definitions)}]"
    if schema_type == "object":
        return "Dict[str, Any]"
    return "Any"


def _is_typed_dict(schema: Optional[Dict[str, Any]]) -> bool:
    if not schema or "enum" in schema:
        return False
    if isinstance(schema.get("additionalProperties"), dict):
        return False
    return schema.get("type") == "object" or "properties" in schema


def _render_definition(name: str, schema: Dict[str, Any], definitions: Dict[str, Any]) -> str:
    cls = type_name(name)

    if "enum" in schema:
        values = ", ".join(json.dumps(v) for v in schema["enum"])
        return f"{cls} = Literal[{values}]"

    if not _is_typed_dict(schema):
        return f"{cls} = {_python_type(schema, definitions)}"

    properties = schema.get("properties") or {}
    if any(not p.isidentifier() or keyword.iskeyword(p) for p in properties):
        fields = ", ".join(
            f"{json.dumps(p)}: {json.dumps(_python_type(s, definitions))}"
            for p, s in properties.items()
        )
        return f"{cls} = TypedDict({json.dumps(cls)}, {{{fields}}}, total=False)"

    lines = [f"class {cls}(TypedDict, total=False):"]
    description = schema.get("description")
    if description:
        lines.append(f"    {json.dumps(description)}")
    for prop, prop_schema in properties.items():
        lines.append(f"    {prop}: {_python_type(prop_schema, definitions)}")
    if len(lines) == 1:
        lines.append("    pass")
    return "\n".join(lines)


def _resolve_property_ref(
    definitions: Dict[str, Any],
    start: Optional[str],
    path: List[str],
) -> Optional[str]:
    """Follow properties[...]['$ref'] links, e.g. ActivityResponse -> activity -> result."""
    current = start
    for prop in path:
        if current is None:
            return None
        schema = definitions.get(current) or {}
        current = ref_name(((schema.get("properties") or {}).get(prop) or {}).get("$ref"))
    return current


def _render_operation_types(
    binding: Binding,
    definitions: Dict[str, Any],
    reconciled: Dict[str, VersionedEntity],
) -> List[str]:
    out = []

    def alias(name: str, target_ref: Optional[str]) -> None:
        if target_ref is not None and target_ref in definitions:
            target = type_name(target_ref)
        else:
            target = "Dict[str, Any]"
        if target != name:
            out.append(f"{name} = {target}")

    def subclass(name: str, base_ref: Optional[str], mixin: str) -> None:
        if base_ref is not None and _is_typed_dict(definitions.get(base_ref)):
            out.append(f"class {name}({type_name(base_ref)}, {mixin}, total=False):\n    pass")
        else:
            out.append(f"class {name}({mixin}, total=False):\n    pass")

    if binding.kind in (OperationKind.COMMAND, OperationKind.ACTIVITY_DECISION):
        intent_ref = _resolve_property_ref(definitions, binding.body_schema_ref, ["parameters"])
        subclass(binding.body_type, intent_ref, "CommandOverrideParams")
    else:
        alias(binding.body_type, binding.body_schema_ref)

    if binding.kind == OperationKind.COMMAND:
        entity = reconciled[binding.operation_name + RESULT_SUFFIX]
        subclass(binding.response_type, entity.full_name, "ActivityMetadata")
    elif binding.kind == OperationKind.ACTIVITY_DECISION:
        result_ref = _resolve_property_ref(
            definitions, binding.response_schema_ref, ["activity", "result"]
        )
        subclass(binding.response_type, result_ref, "ActivityMetadata")
    else:
        alias(binding.response_type, binding.response_schema_ref)

    return out


def render_api_types(bindings: List[Binding], api_description: Dict[str, Any]) -> str:
    """Source text of sdk_api_types.py."""
    definitions = api_description.get("definitions") or {}
    reconciled = reconcile(definitions)

    names: Dict[str, str] = {}
    for name in definitions:
        cls = type_name(name)
        if cls in names:
            raise GenerationError(f"Definitions {names[cls]} and {name} both map to {cls}")
        names[cls] = name

    # Class annotations are lazy; module-level aliases are not, so enums
    # precede the classes and every other alias follows them.
    enums = []
    classes = []
    aliases = []
    for name, schema in definitions.items():
        schema = schema or {}
        rendered = _render_definition(name, schema, definitions)
        if "enum" in schema:
            enums.append(rendered)
        elif _is_typed_dict(schema):
            classes.append(rendered)
        else:
            aliases.append(rendered)

    operations = []
    for binding in bindings:
        for rendered in _render_operation_types(binding, definitions, reconciled):
            target = rendered.split()[1].split("(")[0] if rendered.startswith("class ") else rendered.split()[0]
            if target in names:
                raise GenerationError(f"{target} for {binding.operation_name} shadows a definition")
            operations.append(rendered)

    sections = [GENERATED_HEADER, API_TYPES_PRELUDE]
    sections.extend(enums)
    sections.extend(classes)
    sections.extend(aliases)
    sections.append("# Operation inputs and outputs")
    sections.extend(operations)
    return "\n\n\n".join(sections) + "\n"


# -----------------------------------------------------------------------------
# Rendering: sdk_client_base.py
# -----------------------------------------------------------------------------

CLIENT_BASE_PRELUDE = '''from typing import Any, Callable, Dict, Optional

from ..client import ActivityClient
from . import sdk_api_types as api_types


class SdkClientBase(ActivityClient):
    """Generated bindings, one coroutine per API operation."""'''


def _render_method(binding: Binding) -> str:
    if binding.input_optional:
        signature = f"input: Optional[api_types.{binding.body_type}] = None"
    else:
        signature = f"input: api_types.{binding.body_type}"

    head = (
        f"    async def {binding.method_name}(self, {signature}) "
        f"-> api_types.{binding.response_type}:\n"
    )

    if binding.kind == OperationKind.QUERY:
        return head + (
            f"        return await self.request({json.dumps(binding.http_path)}, self.query_body(input))"
        )
    if binding.kind == OperationKind.COMMAND:
        return head + (
            f"        return await self.command(\n"
            f"            {json.dumps(binding.http_path)},\n"
            f"            self.activity_body(input, {json.dumps(binding.activity_type)}),\n"
            f"            {json.dumps(binding.result_key)},\n"
            f"        )"
        )
    return head + (
        f"        return await self.activity_decision(\n"
        f"            {json.dumps(binding.http_path)},\n"
        f"            self.activity_body(input, {json.dumps(binding.activity_type)}),\n"
        f"        )"
    )


def render_client_base(bindings: List[Binding]) -> str:
    """Source text of sdk_client_base.py."""
    callable_bindings = [b for b in bindings if b.kind != OperationKind.NOOP]

    methods = "\n\n".join(_render_method(b) for b in callable_bindings)
    registry = "\n".join(
        f"    {json.dumps(b.wire_name)}: SdkClientBase.{b.method_name}," for b in callable_bindings
    )

    sections = [
        GENERATED_HEADER,
        CLIENT_BASE_PRELUDE + "\n\n" + methods,
        "# Proxy-callable name -> unbound method\n"
        "API_METHODS: Dict[str, Callable[..., Any]] = {\n" + registry + "\n}",
    ]
    return "\n\n\n".join(sections) + "\n"


# -----------------------------------------------------------------------------
# CLI
# -----------------------------------------------------------------------------

def load_api_description(path: Path) -> Dict[str, Any]:
    with path.open("r", encoding="utf-8") as f:
        return json.load(f)


def build_sources(api_description: Dict[str, Any]) -> Dict[str, str]:
    """Render both modules in memory; nothing is written on failure."""
    reconciled = reconcile(api_description.get("definitions") or {})
    bindings = generate(api_description, reconciled)
    return {
        API_TYPES_FILENAME: render_api_types(bindings, api_description),
        CLIENT_BASE_FILENAME: render_client_base(bindings),
    }


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        prog="custodia-codegen",
        description="Generate typed bindings from the public API swagger document",
    )
    parser.add_argument("--input", type=Path, default=DEFAULT_INPUT_PATH,
                        help=f"Swagger document (default: {DEFAULT_INPUT_PATH})")
    parser.add_argument("--output-dir", type=Path, default=DEFAULT_OUTPUT_DIR,
                        help=f"Directory for generated modules (default: {DEFAULT_OUTPUT_DIR})")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    try:
        api_description = load_api_description(args.input)
        sources = build_sources(api_description)
    except (OSError, ValueError, KeyError, GenerationError) as e:
        logger.error(f"Code generation failed: {e}")
        return 1

    args.output_dir.mkdir(parents=True, exist_ok=True)
    for filename, source in sources.items():
        target = args.output_dir / filename
        target.write_text(source, encoding="utf-8")
        print(f"[codegen] {args.input.name} -> {target}")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
