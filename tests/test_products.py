from tests.conftest import find_account


def product_payload(**overrides) -> dict:
    data = {"name": "Xylene", "product_number": "CHEM-005E", "attributes": ["drums", "bulk"]}
    data.update(overrides)
    return data


def create_product(client, headers, **overrides) -> dict:
    response = client.post("/api/products", headers=headers, json=product_payload(**overrides))
    assert response.status_code == 201, response.text
    return response.json()


class TestProductCatalogue:
    def test_seeded_catalogue(self, client, signed_up_headers):
        response = client.get("/api/products", headers=signed_up_headers)

        assert response.status_code == 200
        assert len(response.json()) == 4

    def test_create_product(self, client, signed_up_headers):
        product = create_product(client, signed_up_headers)

        assert product["name"] == "Xylene"
        assert product["attributes"] == ["drums", "bulk"]

    def test_unknown_volume_rejected(self, client, signed_up_headers):
        response = client.post(
            "/api/products", headers=signed_up_headers, json=product_payload(attributes=["barrels"])
        )

        assert response.status_code == 422

    def test_update_product(self, client, signed_up_headers):
        product = create_product(client, signed_up_headers)

        response = client.patch(
            f"/api/products/{product['id']}", headers=signed_up_headers, json={"attributes": ["pails"]}
        )

        assert response.status_code == 200
        assert response.json()["attributes"] == ["pails"]
        assert response.json()["name"] == "Xylene"

    def test_other_company_product_not_found(self, client, user_a_headers, user_b_headers):
        product = create_product(client, user_a_headers)

        response = client.get(f"/api/products/{product['id']}", headers=user_b_headers)

        assert response.status_code == 404


class TestAccountProducts:
    def test_link_product_to_account(self, client, signed_up_headers):
        account = find_account(client, signed_up_headers, "Quantum Solutions")
        product = create_product(client, signed_up_headers)

        response = client.post(
            f"/api/accounts/{account['id']}/products",
            headers=signed_up_headers,
            json={
                "product_id": product["id"],
                "notes": "Sample requested",
                "price_type": "bid",
                "bid_frequency": "quarterly",
                "last_bid_price": 3.25,
            },
        )

        assert response.status_code == 201
        link = response.json()
        assert link["product_name"] == "Xylene"
        assert link["bid_frequency"] == "quarterly"
        assert link["last_bid_price"] == 3.25

    def test_bid_requires_frequency(self, client, signed_up_headers):
        account = find_account(client, signed_up_headers, "Quantum Solutions")
        product = create_product(client, signed_up_headers)

        response = client.post(
            f"/api/accounts/{account['id']}/products",
            headers=signed_up_headers,
            json={"product_id": product["id"], "price_type": "bid"},
        )

        assert response.status_code == 422
        assert "Bid frequency is required" in response.text

    def test_duplicate_link_rejected(self, client, signed_up_headers):
        account = find_account(client, signed_up_headers, "Quantum Solutions")
        product = create_product(client, signed_up_headers)
        url = f"/api/accounts/{account['id']}/products"

        client.post(url, headers=signed_up_headers, json={"product_id": product["id"]})
        response = client.post(url, headers=signed_up_headers, json={"product_id": product["id"]})

        assert response.status_code == 400
        assert "already exists" in response.json()["detail"]

    def test_unknown_product_not_found(self, client, signed_up_headers):
        account = find_account(client, signed_up_headers, "Quantum Solutions")

        response = client.post(
            f"/api/accounts/{account['id']}/products", headers=signed_up_headers, json={"product_id": "nope"}
        )

        assert response.status_code == 404

    def test_seeded_links_listed(self, client, signed_up_headers):
        account = find_account(client, signed_up_headers, "Innovate Corp")

        response = client.get(f"/api/accounts/{account['id']}/products", headers=signed_up_headers)

        assert response.status_code == 200
        links = response.json()
        assert len(links) == 2
        assert {link["type"] for link in links} == {"last_paid", "quote"}

    def test_update_and_delete_link(self, client, signed_up_headers):
        account = find_account(client, signed_up_headers, "Quantum Solutions")
        product = create_product(client, signed_up_headers)
        link = client.post(
            f"/api/accounts/{account['id']}/products",
            headers=signed_up_headers,
            json={"product_id": product["id"]},
        ).json()

        response = client.patch(
            f"/api/account-products/{link['id']}",
            headers=signed_up_headers,
            json={"notes": "Won the bid", "type": "quote", "price": 3.1},
        )
        assert response.status_code == 200
        assert response.json()["notes"] == "Won the bid"
        assert response.json()["price"] == 3.1

        response = client.delete(f"/api/account-products/{link['id']}", headers=signed_up_headers)
        assert response.status_code == 204
        assert client.get(f"/api/accounts/{account['id']}/products", headers=signed_up_headers).json() == []

    def test_deleting_product_unlinks_accounts(self, client, signed_up_headers):
        account = find_account(client, signed_up_headers, "Quantum Solutions")
        product = create_product(client, signed_up_headers)
        client.post(
            f"/api/accounts/{account['id']}/products",
            headers=signed_up_headers,
            json={"product_id": product["id"]},
        )

        response = client.delete(f"/api/products/{product['id']}", headers=signed_up_headers)

        assert response.status_code == 204
        assert client.get(f"/api/accounts/{account['id']}/products", headers=signed_up_headers).json() == []
