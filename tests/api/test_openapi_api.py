"""Tests for the published OpenAPI document."""

from postkeeper.web.openapi import PUBLIC_ENDPOINTS


def get_schema(client):
    response = client.get("/openapi.json")
    assert response.status_code == 200
    return response.json()


class TestSecuritySchemes:
    def test_bearer_scheme(self, client):
        schemes = get_schema(client)["components"]["securitySchemes"]
        assert schemes["BearerAuth"]["type"] == "http"
        assert schemes["BearerAuth"]["scheme"] == "bearer"

    def test_operation_security_references_resolve(self, client):
        schema = get_schema(client)
        schemes = schema["components"]["securitySchemes"]

        referenced = {
            name
            for path_item in schema["paths"].values()
            for operation in path_item.values()
            for requirement in operation.get("security", [])
            for name in requirement
        }
        assert referenced == {"BearerAuth"}
        assert referenced <= schemes.keys()

    def test_public_endpoints_need_no_auth(self, client):
        paths = get_schema(client)["paths"]
        for method, path in PUBLIC_ENDPOINTS:
            assert paths[path][method.lower()]["security"] == []

    def test_protected_endpoints_require_bearer(self, client):
        paths = get_schema(client)["paths"]
        assert paths["/api/user"]["get"]["security"] == [{"BearerAuth": []}]
        assert paths["/api/posts"]["post"]["security"] == [{"BearerAuth": []}]
