from portals_openapi.output.assembler import PathMapAssembler
from portals_openapi.parser.base import Operation, OperationObject


def _op(endpoint: str, method: str, summary: str) -> Operation:
    return Operation(endpoint=endpoint, method=method, operation=OperationObject(summary=summary))


class TestPathMapAssembler:
    def test_groups_methods_under_endpoint(self):
        assembler = PathMapAssembler()
        assembler.add(_op("/api/2.0/files/item", "get", "Get"))
        assembler.add(_op("/api/2.0/files/list", "get", "List"))
        assembler.add(_op("/api/2.0/files/item", "delete", "Delete"))

        assert list(assembler.paths) == ["/api/2.0/files/item", "/api/2.0/files/list"]
        assert list(assembler.paths["/api/2.0/files/item"]) == ["get", "delete"]
        assert assembler.paths["/api/2.0/files/item"]["delete"] == {"summary": "Delete"}

    def test_last_write_wins(self, caplog):
        assembler = PathMapAssembler()
        assembler.add(_op("/api/2.0/files/item", "get", "First"))
        assembler.add(_op("/api/2.0/files/item", "get", "Second"))

        assert assembler.paths["/api/2.0/files/item"] == {"get": {"summary": "Second"}}
        assert assembler.duplicates == 1
        assert "overwriting get /api/2.0/files/item" in caplog.text

    def test_document(self):
        assembler = PathMapAssembler()
        assembler.add(_op("/api/2.0/files/item", "get", "Get"))
        doc = assembler.document("Community Server REST API", "latest")

        assert doc == {
            "openapi": "3.0.1",
            "info": {"title": "Community Server REST API", "version": "latest"},
            "paths": {"/api/2.0/files/item": {"get": {"summary": "Get"}}},
        }
