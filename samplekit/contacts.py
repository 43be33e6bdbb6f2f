"""Decode and encode contact and search-result documents as JSON."""

from __future__ import annotations

import argparse
import json
import sys
from dataclasses import dataclass, field, fields, is_dataclass
from typing import Any
from urllib.request import urlopen

SAMPLE_JSON = """{
\t"name": "Gopher",
\t"title": "programmer",
\t"contact": {
\t\t"home": "[phone]",
\t\t"cell": "[phone]"
\t}
}"""

_ESCAPES = (
    ("<", "\\u003c"),
    (">", "\\u003e"),
    ("&", "\\u0026"),
    ("\u2028", "\\u2028"),
    ("\u2029", "\\u2029"),
)


def _json(name: Any, **kwargs: Any) -> Any:
    return field(metadata={"json": name}, **kwargs)


@dataclass
class ContactInfo:
    """Phone numbers of a contact."""

    home: str = _json("home", default="")
    cell: str = _json("cell", default="")


@dataclass
class Contact:
    """A person with a title and contact numbers."""

    name: str = _json("name", default="")
    title: str = _json("title", default="")
    contact: ContactInfo = _json("contact", default_factory=ContactInfo)


@dataclass
class WebResult:
    """One result of a web search response."""

    gsearch_result_class: str = _json("GsearchResultClass", default="")
    unescaped_url: str = _json("unescapedUrl", default="")
    url: str = _json("url", default="")
    visible_url: str = _json("visibleUrl", default="")
    cache_url: str = _json("cacheUrl", default="")
    title: str = _json("title", default="")
    title_no_formatting: str = _json("titleNoFormatting", default="")
    content: str = _json("content", default="")


@dataclass
class WebResponse:
    """A web search response; its results sit under ``responseData``."""

    results: list[WebResult] = _json(("responseData", "results"), default_factory=list)


def _loads(text: str | bytes) -> Any:
    try:
        return json.loads(text)
    except json.JSONDecodeError as exc:
        raise ValueError(f"invalid JSON: {exc}") from exc


def _lookup(obj: dict, key: str) -> Any:
    if key in obj:
        return obj[key]
    folded = key.casefold()
    for name, value in obj.items():
        if name.casefold() == folded:
            return value
    return None


def _string(obj: dict, key: str) -> str:
    value = _lookup(obj, key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise ValueError(f"cannot decode {type(value).__name__} into string field {key!r}")
    return value


def _object(obj: dict, key: str) -> dict:
    value = _lookup(obj, key)
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise ValueError(f"cannot decode {type(value).__name__} into object field {key!r}")
    return value


def _top_object(text: str | bytes) -> dict:
    data = _loads(text)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"cannot decode {type(data).__name__} into an object")
    return data


def _decode_fields(cls: type, obj: dict) -> Any:
    values = {f.name: _string(obj, f.metadata["json"]) for f in fields(cls)}
    return cls(**values)


def decode_contact(text: str | bytes) -> Contact:
    """Decode a contact document."""
    data = _top_object(text)
    return Contact(
        name=_string(data, "name"),
        title=_string(data, "title"),
        contact=_decode_fields(ContactInfo, _object(data, "contact")),
    )


def decode_mapping(text: str | bytes) -> dict[str, Any]:
    """Decode a JSON object into a plain dictionary."""
    return _top_object(text)


def decode_web_response(text: str | bytes) -> WebResponse:
    """Decode a web search response."""
    data = _top_object(text)
    response_data = _object(data, "responseData")
    raw_results = _lookup(response_data, "results")
    if raw_results is None:
        return WebResponse()
    if not isinstance(raw_results, list):
        raise ValueError("results must be a JSON array")
    results = []
    for entry in raw_results:
        if entry is None:
            results.append(WebResult())
        elif isinstance(entry, dict):
            results.append(_decode_fields(WebResult, entry))
        else:
            raise ValueError(f"cannot decode {type(entry).__name__} into a result")
    return WebResponse(results=results)


def _jsonable(value: Any) -> Any:
    if is_dataclass(value) and not isinstance(value, type):
        out: dict[str, Any] = {}
        for f in fields(value):
            name = f.metadata.get("json", f.name)
            item = _jsonable(getattr(value, f.name))
            if isinstance(name, tuple):
                target = out
                for part in name[:-1]:
                    target = target.setdefault(part, {})
                target[name[-1]] = item
            else:
                out[name] = item
        return out
    if isinstance(value, dict):
        return {
            str(key): _jsonable(item)
            for key, item in sorted(value.items(), key=lambda pair: str(pair[0]))
        }
    if isinstance(value, (list, tuple)):
        return [_jsonable(item) for item in value]
    return value


def encode_pretty(value: Any) -> str:
    """Encode ``value`` as JSON indented by four spaces, map keys sorted."""
    text = json.dumps(_jsonable(value), indent=4, ensure_ascii=False)
    for char, escape in _ESCAPES:
        text = text.replace(char, escape)
    return text


def _show_mapping(mapping: dict[str, Any]) -> None:
    contact = mapping.get("contact")
    contact = contact if isinstance(contact, dict) else {}
    print("Name:", mapping.get("name"))
    print("Title:", mapping.get("title"))
    print("Contact")
    print("H:", contact.get("home"))
    print("C:", contact.get("cell"))


def main(argv: list[str] | None = None) -> int:
    """Decode or encode the sample documents, or decode a fetched search response."""
    parser = argparse.ArgumentParser(description="Work with JSON documents.")
    parser.add_argument(
        "mode", nargs="?", choices=("struct", "map", "encode", "web"), default="struct",
        help="what to do",
    )
    parser.add_argument("url", nargs="?", help="search response to fetch in web mode")
    args = parser.parse_args(argv)

    try:
        if args.mode == "struct":
            print(decode_contact(SAMPLE_JSON))
        elif args.mode == "map":
            _show_mapping(decode_mapping(SAMPLE_JSON))
        elif args.mode == "encode":
            print(encode_pretty(decode_mapping(SAMPLE_JSON)))
        else:
            if not args.url:
                parser.error("web mode needs a URL")
            with urlopen(args.url) as response:
                body = response.read()
            document = decode_web_response(body)
            print(document)
            print(encode_pretty(document))
    except (OSError, ValueError, TypeError) as exc:
        print("ERROR:", exc, file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())