import json

from project_engine.services.prompt_builder import (
    build_code_prompt,
    build_prompt_for_files,
    serialize_files,
)


def test_prompt_mandates_reply_format():
    prompt = build_code_prompt("a red button")

    for marker in ("[FILES]", "FILENAME: index.html", "CODE:", "[TALK]", "[END]"):
        assert marker in prompt
    assert prompt.endswith("User request: a red button")
    assert "Current code to modify" not in prompt


def test_prompt_embeds_existing_code_before_request():
    existing = serialize_files({"index.html": "<h1>{title}</h1>"})

    prompt = build_code_prompt("make it blue", existing)

    assert f"Current code to modify:\n{existing}" in prompt
    assert prompt.index("Current code to modify") < prompt.index("User request: make it blue")


def test_prompt_is_deterministic():
    assert build_code_prompt("x", "{}") == build_code_prompt("x", "{}")


def test_empty_file_set_counts_as_no_existing_code():
    assert build_prompt_for_files("hello", {}) == build_code_prompt("hello")


def test_serialized_files_round_trip():
    files = {"index.html": '<p class="a">ünïcode</p>', "script.js": "alert('x')\n"}

    assert json.loads(serialize_files(files)) == files
