import json

import click

from holo_hash import HashType, HoloHash, HoloHashError, hash_bytes, hash_content
from holo_hash.hash_type import resolve
from holo_hash.hashing import CANONICAL_JSON_KW
from .logic import describe, inspect_hash


def _echo_json(obj) -> None:
    click.echo(json.dumps(obj, **CANONICAL_JSON_KW))


def _fatal(e: Exception) -> None:
    # Fail closed with a single-line reason.
    click.echo(f"FATAL: {e}")
    raise SystemExit(1)


def _hash_type(ctx, param, value):
    if value is None:
        return None
    try:
        return resolve(value)
    except HoloHashError as e:
        raise click.BadParameter(str(e))


@click.group()
def main():
    pass


@main.command("inspect")
@click.argument("token")
@click.option("--expect", callback=_hash_type, help="Required type, e.g. entry or AnyDhtHash")
def inspect_cmd(token: str, expect):
    result = inspect_hash(token, expected=expect)
    _echo_json(result)
    if result["status"] != "PASS":
        raise SystemExit(1)


@main.command("encode")
@click.argument("hex_bytes")
def encode_cmd(hex_bytes: str):
    """Encode a 39-byte hex hash as its text token (location is verified)."""
    try:
        h = HoloHash.from_full_bytes(bytes.fromhex(hex_bytes))
    except (HoloHashError, ValueError) as e:
        _fatal(e)
    click.echo(h.to_string())


@main.command("hash")
@click.argument("source", type=click.File("rb"), default="-")
@click.option("--type", "type_name", default="entry", callback=_hash_type, help="Hash type to produce")
@click.option("--json", "as_json", is_flag=True, help="Hash the canonical JSON of the parsed file")
def hash_cmd(source, type_name, as_json: bool):
    if not isinstance(type_name, HashType):
        _fatal(ValueError(f"{type_name.name} is a composite type; pick a concrete one"))
    data = source.read()
    try:
        if as_json:
            h = hash_content(json.loads(data.decode("utf-8")), type_name)
        else:
            h = hash_bytes(data, type_name)
    except (HoloHashError, ValueError) as e:
        _fatal(e)
    click.echo(h.to_string())


@main.command("location")
@click.argument("token")
def location_cmd(token: str):
    try:
        h = HoloHash.from_string(token)
    except HoloHashError as e:
        _fatal(e)
    d = describe(h)
    _echo_json({"location": d["location"], "location_u32": d["location_u32"]})


if __name__ == "__main__":
    main()
