import json

from user_todos.generate_openapi import generate_openapi


def test_writes_schema_with_all_routes(tmp_path):
    out = tmp_path / "interfaces" / "openapi.json"
    written = generate_openapi(str(out))
    assert written == str(out)

    schema = json.loads(out.read_text(encoding="utf-8"))
    assert {"/users", "/users/{user_id}", "/users/{user_id}/pro", "/todos", "/todos/{todo_id}", "/todos/{todo_id}/done"} <= set(schema["paths"])
    assert {t["name"] for t in schema["tags"]} >= {"health", "users", "todos"}
