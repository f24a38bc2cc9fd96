"""Generated API documentation."""

EXPECTED_PATHS = {
    "/drinks",
    "/drinks/{drink_id}",
    "/ingredients",
    "/ingredient/{ingredient_id}",
}


async def test_docs_page_is_served(client):
    res = await client.get("/docs")
    assert res.status_code == 200
    assert "swagger-ui" in res.text
    assert "/openapi.json" in res.text


async def test_openapi_lists_exactly_the_catalog_routes(client):
    schema = (await client.get("/openapi.json")).json()
    assert set(schema["paths"]) == EXPECTED_PATHS
    for path in EXPECTED_PATHS:
        assert set(schema["paths"][path]) == {"get"}


async def test_openapi_routes_declare_no_security(client):
    schema = (await client.get("/openapi.json")).json()
    for path in EXPECTED_PATHS:
        assert schema["paths"][path]["get"]["security"] == []


async def test_openapi_metadata(client):
    schema = (await client.get("/openapi.json")).json()
    assert schema["info"]["title"] == "drinks.wiki api docs"
    assert {tag["name"] for tag in schema["tags"]} == {"drinks", "ingredients"}


async def test_openapi_documents_limit_bounds(client):
    schema = (await client.get("/openapi.json")).json()
    params = {p["name"]: p for p in schema["paths"]["/drinks"]["get"]["parameters"]}
    assert params["limit"]["schema"]["minimum"] == 1
    assert params["limit"]["schema"]["maximum"] == 100
    assert params["limit"]["schema"]["default"] == 20
    assert params["skip"]["schema"]["default"] == 0


async def test_redoc_is_disabled(client):
    res = await client.get("/redoc")
    assert res.status_code == 404
