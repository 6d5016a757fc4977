import pytest

from .conftest import auth_headers

PRICING = [{"partySize": 1, "price": 60}, {"partySize": 2, "price": 100}]


@pytest.fixture
def provider(factory):
    tenant = factory.tenant()
    return factory.provider(tenant, factory.provider_type(tenant))


def test_anonymous_caller_is_not_logged_in(client, provider):
    response = client.get("/clients/check-pricing", params={"providerId": provider.id})

    assert response.status_code == 200
    assert response.json() == {"hasCustomPricing": False, "message": "Not logged in"}


def test_anonymous_caller_without_provider_is_not_logged_in(client, db_session):
    response = client.get("/clients/check-pricing")

    assert response.json() == {"hasCustomPricing": False, "message": "Not logged in"}


def test_invalid_token_is_treated_as_anonymous(client, provider):
    response = client.get(
        "/clients/check-pricing",
        params={"providerId": provider.id},
        headers={"Authorization": "Bearer not-a-token"},
    )

    assert response.status_code == 200
    assert response.json()["message"] == "Not logged in"


def test_provider_id_is_required(client, db_session):
    response = client.get("/clients/check-pricing", headers=auth_headers("sam@example.com"))

    assert response.status_code == 400
    assert response.json() == {"error": "Provider ID is required"}


def test_no_client_record(client, provider):
    response = client.get(
        "/clients/check-pricing",
        params={"providerId": provider.id},
        headers=auth_headers("stranger@example.com"),
    )

    assert response.json() == {"hasCustomPricing": False, "message": "No client record found"}


def test_match_ignores_email_case(client, factory, provider):
    factory.client_record(provider, pricing_table=PRICING, pricing_notes="Weekday rates")

    response = client.get(
        "/clients/check-pricing",
        params={"providerId": provider.id},
        headers=auth_headers("Sam@Example.COM"),
    )

    assert response.status_code == 200
    assert response.json() == {
        "hasCustomPricing": True,
        "clientInfo": {
            "name": "Sam Lee",
            "pricingTable": PRICING,
            "pricingNotes": "Weekday rates",
        },
    }


def test_match_without_pricing_table(client, factory, provider):
    factory.client_record(provider)

    response = client.get(
        "/clients/check-pricing",
        params={"providerId": provider.id},
        headers=auth_headers("sam@example.com"),
    )

    body = response.json()
    assert body["hasCustomPricing"] is False
    assert body["clientInfo"]["pricingTable"] is None


def test_inactive_client_is_ignored(client, factory, provider):
    factory.client_record(provider, pricing_table=PRICING, is_active=False)

    response = client.get(
        "/clients/check-pricing",
        params={"providerId": provider.id},
        headers=auth_headers("sam@example.com"),
    )

    assert response.json()["message"] == "No client record found"
