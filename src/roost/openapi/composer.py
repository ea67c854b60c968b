"""Document composer: merges mounted route groups into one API document.

``compose`` is pure: the same metadata, tag tables, and mounted groups
always give a byte-identical document. It re-checks path uniqueness on
its own instead of trusting the registry, because documentation can be
composed from groups that never went through a registry.

Tag handling:

- tag descriptors are deduplicated by name, first declaration wins
- every tag-group member and every operation tag must be a known tag
- the top-level tag list follows tag-group order, then appends tags
  no group mentions in first-seen order
- an operation tag outside every group is logged as a documentation gap
"""

import logging
from collections.abc import Iterable, Sequence
from http import HTTPStatus
from typing import Any

from pydantic.json_schema import models_json_schema

from roost.errors import DuplicatePathError, UnknownTagError
from roost.openapi.document import CompositeDocument
from roost.openapi.metadata import DocumentMeta, TagDescriptor, TagGroup
from roost.routing.params import SCHEMA_TYPES
from roost.routing.route import (
    OperationDescriptor,
    PathSegment,
    RouteGroup,
    SchemaRef,
    join_path,
)
from roost.routing.router import parse_path

logger = logging.getLogger("roost.openapi")

REF_TEMPLATE = "#/components/schemas/{model}"


def compose(
    meta: DocumentMeta,
    tags: Iterable[TagDescriptor],
    tag_groups: Iterable[TagGroup],
    mounted: Sequence[tuple[str, RouteGroup]],
) -> CompositeDocument:
    """Build the API document for *mounted* ``(prefix, group)`` pairs.

    Raises:
        UnknownTagError: an operation or tag group names an unknown tag.
        DuplicatePathError: two operations document the same method and path.
    """
    tag_table = _dedupe_tags(tags)
    groups = tuple(tag_groups)
    for group in groups:
        for name in group.tags:
            if name not in tag_table:
                raise UnknownTagError(name, f"tag group {group.name!r}")

    grouped = {name for group in groups for name in group.tags}
    schema_refs = _schema_refs(op for _, rg in mounted for op in rg.operations)

    paths: dict[str, dict[str, dict[str, Any]]] = {}
    # (method, path with parameter names erased) -> documented path
    seen: dict[tuple[str, str], str] = {}
    # path with every parameter erased -> first documented spelling
    templates: dict[str, str] = {}
    gaps: list[str] = []

    for prefix, route_group in mounted:
        for op in route_group.operations:
            full_path = join_path(prefix, op.path)
            for name in op.tags:
                if name not in tag_table:
                    raise UnknownTagError(name, f"{op.method} {full_path}")
                if name not in grouped and name not in gaps:
                    gaps.append(name)

            segments = parse_path(full_path)
            doc_path = "/" + "/".join(
                "{" + seg.param_name + "}" if seg.is_param else seg.value for seg in segments
            )
            key = (op.method, "/" + "/".join(seg.shape for seg in segments))
            if key in seen or op.method.lower() in paths.get(doc_path, {}):
                raise DuplicatePathError(op.method, doc_path)
            template = "/" + "/".join("{}" if seg.is_param else seg.value for seg in segments)
            existing = templates.setdefault(template, doc_path)
            if existing != doc_path:
                raise DuplicatePathError(op.method, doc_path, existing)
            seen[key] = doc_path

            entry = _operation_entry(op, segments, schema_refs)
            paths.setdefault(doc_path, {})[op.method.lower()] = entry

    for name in gaps:
        logger.warning("Tag %r is used by operations but belongs to no tag group", name)

    document = CompositeDocument(
        info=meta.info,
        servers=meta.servers,
        tags=_order_tags(tag_table, groups),
        tag_groups=groups,
        paths=paths,
        components=_components(schema_refs),
        extensions=dict(meta.extensions),
        external_docs=meta.external_docs,
    )
    logger.debug(
        "Composed document: %d paths, %d operations, %d schemas",
        len(paths),
        document.operation_count,
        len(document.components.get("schemas", {})),
    )
    return document


def _dedupe_tags(tags: Iterable[TagDescriptor]) -> dict[str, TagDescriptor]:
    table: dict[str, TagDescriptor] = {}
    for tag in tags:
        existing = table.get(tag.name)
        if existing is None:
            table[tag.name] = tag
        elif existing.description != tag.description:
            logger.warning(
                "Tag %r declared twice with different descriptions; keeping the first",
                tag.name,
            )
    return table


def _order_tags(
    table: dict[str, TagDescriptor], groups: tuple[TagGroup, ...]
) -> tuple[TagDescriptor, ...]:
    ordered: dict[str, TagDescriptor] = {}
    for group in groups:
        for name in group.tags:
            ordered.setdefault(name, table[name])
    for name, tag in table.items():
        ordered.setdefault(name, tag)
    return tuple(ordered.values())


class _SchemaRefs:
    """Component schemas and the ``$ref`` objects pointing at them."""

    __slots__ = ("definitions", "refs")

    def __init__(self, refs: dict[SchemaRef, dict[str, str]], definitions: dict[str, Any]) -> None:
        self.refs = refs
        self.definitions = definitions


def _schema_refs(operations: Iterable[OperationDescriptor]) -> _SchemaRefs:
    models: dict[SchemaRef, None] = {}
    for op in operations:
        if op.request_schema is not None:
            models.setdefault(op.request_schema)
        for _, model in op.responses:
            if model is not None:
                models.setdefault(model)
    if not models:
        return _SchemaRefs({}, {})

    key_map, top = models_json_schema(
        [(model, "validation") for model in models],
        ref_template=REF_TEMPLATE,
    )
    refs = {model: key_map[(model, "validation")] for model in models}
    definitions = top.get("$defs", {})
    return _SchemaRefs(refs, {name: definitions[name] for name in sorted(definitions)})


def _components(schema_refs: _SchemaRefs) -> dict[str, Any]:
    if not schema_refs.definitions:
        return {}
    return {"schemas": schema_refs.definitions}


def _json_content(ref: dict[str, str]) -> dict[str, Any]:
    return {"application/json": {"schema": ref}}


def _status_description(status: int) -> str:
    try:
        return HTTPStatus(status).phrase
    except ValueError:
        return "Response"


def _operation_entry(
    op: OperationDescriptor,
    segments: list[PathSegment],
    schema_refs: _SchemaRefs,
) -> dict[str, Any]:
    entry: dict[str, Any] = {}
    if op.tags:
        entry["tags"] = list(op.tags)
    if op.summary:
        entry["summary"] = op.summary
    if op.description:
        entry["description"] = op.description
    entry["operationId"] = op.resolved_operation_id

    parameters = [
        {
            "name": seg.param_name,
            "in": "path",
            "required": True,
            "schema": dict(SCHEMA_TYPES[seg.param_type]),
        }
        for seg in segments
        if seg.is_param
    ]
    if parameters:
        entry["parameters"] = parameters

    if op.request_schema is not None:
        entry["requestBody"] = {
            "required": True,
            "content": _json_content(schema_refs.refs[op.request_schema]),
        }

    responses: dict[str, Any] = {}
    for status, model in op.responses or ((200, None),):
        response: dict[str, Any] = {"description": _status_description(status)}
        if model is not None:
            response["content"] = _json_content(schema_refs.refs[model])
        responses[str(status)] = response
    entry["responses"] = responses

    if op.deprecated:
        entry["deprecated"] = True
    return entry
