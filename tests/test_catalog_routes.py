from conftest import API, bearer, register

PRODUCTS = f"{API}/products"
STORES = f"{API}/stores"
MANGOES = {"name": "Fresh Mangoes", "price": 5.99, "stock": 50, "category": "Fruits"}
TOMATOES = {"name": "Organic Tomatoes", "price": 3.49, "stock": 25, "category": "Vegetables"}


def test_grower_creates_product(client, grower_headers):
    response = client.post(PRODUCTS, headers=grower_headers, json=MANGOES)
    assert response.status_code == 201
    product = response.json()
    assert product["name"] == "Fresh Mangoes"
    assert product["grower_id"]


def test_buyer_cannot_create_product(client, buyer_headers):
    response = client.post(PRODUCTS, headers=buyer_headers, json=MANGOES)
    assert response.status_code == 403
    assert response.json() == {"error": "Only growers can list products"}


def test_product_price_must_be_positive(client, grower_headers):
    response = client.post(PRODUCTS, headers=grower_headers, json=dict(MANGOES, price=0))
    assert response.status_code == 400


def test_list_and_filter_products(client, grower_headers):
    client.post(PRODUCTS, headers=grower_headers, json=MANGOES)
    client.post(PRODUCTS, headers=grower_headers, json=TOMATOES)

    body = client.get(PRODUCTS).json()
    assert body["total"] == 2
    assert [p["name"] for p in body["products"]] == ["Organic Tomatoes", "Fresh Mangoes"]

    body = client.get(PRODUCTS, params={"category": "Fruits"}).json()
    assert body["total"] == 1
    assert body["products"][0]["name"] == "Fresh Mangoes"


def test_filter_products_by_grower(client, grower_headers):
    grower_id = client.post(PRODUCTS, headers=grower_headers, json=MANGOES).json()["grower_id"]
    other = bearer(register(client, "other@example.com", role="grower")["token"])
    client.post(PRODUCTS, headers=other, json=TOMATOES)

    body = client.get(PRODUCTS, params={"grower_id": grower_id}).json()
    assert [p["name"] for p in body["products"]] == ["Fresh Mangoes"]


def test_get_product(client, grower_headers):
    product_id = client.post(PRODUCTS, headers=grower_headers, json=MANGOES).json()["id"]
    response = client.get(f"{PRODUCTS}/{product_id}")
    assert response.status_code == 200
    assert response.json()["name"] == "Fresh Mangoes"


def test_get_product_not_found(client):
    response = client.get(f"{PRODUCTS}/missing")
    assert response.status_code == 404
    assert response.json() == {"error": "Product not found"}


def test_owner_updates_product(client, grower_headers):
    product_id = client.post(PRODUCTS, headers=grower_headers, json=MANGOES).json()["id"]
    response = client.put(f"{PRODUCTS}/{product_id}", headers=grower_headers, json={"stock": 10})
    assert response.status_code == 200
    assert response.json()["stock"] == 10
    assert response.json()["name"] == "Fresh Mangoes"



def test_update_rejects_null_for_required_fields(client, grower_headers):
    product_id = client.post(PRODUCTS, headers=grower_headers, json=MANGOES).json()["id"]
    for field in ("price", "name", "stock"):
        response = client.put(
            f"{PRODUCTS}/{product_id}", headers=grower_headers, json={field: None}
        )
        assert response.status_code == 400
        assert field in response.json()["error"]

    response = client.get(f"{PRODUCTS}/{product_id}")
    assert response.json()["name"] == "Fresh Mangoes"
    assert response.json()["stock"] == MANGOES["stock"]

def test_non_owner_cannot_update_or_delete(client, grower_headers):
    product_id = client.post(PRODUCTS, headers=grower_headers, json=MANGOES).json()["id"]
    other = bearer(register(client, "other@example.com", role="grower")["token"])

    response = client.put(f"{PRODUCTS}/{product_id}", headers=other, json={"stock": 0})
    assert response.status_code == 403
    assert response.json() == {"error": "Access denied"}

    response = client.delete(f"{PRODUCTS}/{product_id}", headers=other)
    assert response.status_code == 403


def test_owner_deletes_product(client, grower_headers):
    product_id = client.post(PRODUCTS, headers=grower_headers, json=MANGOES).json()["id"]
    response = client.delete(f"{PRODUCTS}/{product_id}", headers=grower_headers)
    assert response.status_code == 200
    assert client.get(f"{PRODUCTS}/{product_id}").status_code == 404


def test_create_and_list_stores(client, grower_headers):
    response = client.post(
        STORES,
        headers=grower_headers,
        json={"name": "Local Farm Market", "store_type": "Casual", "hours": "8:00-18:00"},
    )
    assert response.status_code == 201
    store = response.json()
    assert store["verified"] is False

    body = client.get(STORES).json()
    assert body["total"] == 1
    assert body["stores"][0]["id"] == store["id"]

    body = client.get(STORES, params={"owner_id": store["owner_id"]}).json()
    assert [s["id"] for s in body["stores"]] == [store["id"]]

    assert client.get(f"{STORES}/{store['id']}").json()["name"] == "Local Farm Market"


def test_create_store_requires_auth(client):
    response = client.post(STORES, json={"name": "Nope"})
    assert response.status_code == 401


def test_store_not_found(client):
    response = client.get(f"{STORES}/missing")
    assert response.status_code == 404
    assert response.json() == {"error": "Store not found"}
