"""
End-to-End Registry Tests

These tests drive the Lambda handler with Function URL events against a
moto DynamoDB table and check both the HTTP responses and what ends up in
the table.

Key testing scenarios:
1. Create then look up
2. Duplicate create is rejected and leaves the original untouched
3. Lookup of a missing user
4. Listing an empty table
5. Malformed payloads never reach the store
"""

import json

import pytest


def body_of(response):
    return json.loads(response["body"])


class TestScenarios:

    def test_create_then_get(self, handler, make_event):
        created = handler(make_event("POST", body={"email": "a@x.com", "username": "Ann"}))
        assert created == {"statusCode": 201}

        found = handler(make_event("GET", query={"email": "a@x.com"}))
        assert found["statusCode"] == 200
        assert body_of(found) == {"email": "a@x.com", "username": "Ann"}

    def test_duplicate_create_conflicts(self, handler, make_event):
        handler(make_event("POST", body={"email": "a@x.com", "username": "Ann"}))

        duplicate = handler(make_event("POST", body={"email": "a@x.com", "username": "Impostor"}))
        assert duplicate["statusCode"] == 409

        found = handler(make_event("GET", query={"email": "a@x.com"}))
        assert body_of(found) == {"email": "a@x.com", "username": "Ann"}

    def test_email_with_surrounding_whitespace_round_trips(self, handler, make_event, users_table):
        created = handler(make_event("POST", body={"email": " a@x.com", "username": "Ann"}))
        assert created == {"statusCode": 201}

        found = handler(make_event("GET", query={"email": " a@x.com"}))
        assert found["statusCode"] == 200
        assert body_of(found) == {"email": " a@x.com", "username": "Ann"}
        assert users_table.get_item(Key={"email": " a@x.com"})["Item"]["email"] == " a@x.com"

    def test_get_missing(self, handler, make_event):
        response = handler(make_event("GET", query={"email": "missing@x.com"}))

        assert response == {"statusCode": 404}

    def test_list_empty(self, handler, make_event):
        response = handler(make_event("GET"))

        assert response["statusCode"] == 200
        assert body_of(response) == []

    def test_malformed_post_creates_nothing(self, handler, make_event, users_table):
        response = handler(make_event("POST", body="not-json"))
        assert response == {"statusCode": 400}

        listed = handler(make_event("GET"))
        assert body_of(listed) == []
        assert users_table.scan()["Items"] == []


class TestPersistedShape:

    def test_name_stored_as_user_name(self, handler, make_event, users_table):
        handler(make_event("POST", body={"email": "a@x.com", "username": "Ann"}))

        item = users_table.get_item(Key={"email": "a@x.com"})["Item"]
        assert item == {"email": "a@x.com", "user_name": "Ann"}

    @pytest.mark.parametrize("body", [{"email": "b@x.com"}, {"email": "b@x.com", "username": ""}])
    def test_absent_name_not_stored(self, handler, make_event, users_table, body):
        handler(make_event("POST", body=body))

        item = users_table.get_item(Key={"email": "b@x.com"})["Item"]
        assert item == {"email": "b@x.com"}

        found = handler(make_event("GET", query={"email": "b@x.com"}))
        assert body_of(found) == {"email": "b@x.com"}

    def test_items_written_outside_the_registry_are_readable(self, handler, make_event, users_table):
        users_table.put_item(Item={"email": "legacy@x.com", "user_name": "Old", "extra": "ignored"})

        found = handler(make_event("GET", query={"email": "legacy@x.com"}))
        assert body_of(found) == {"email": "legacy@x.com", "username": "Old"}


class TestProperties:

    def test_list_completeness(self, handler, make_event):
        emails = {f"user{i}@x.com" for i in range(25)}
        for email in emails:
            assert handler(make_event("POST", body={"email": email}))["statusCode"] == 201

        listed = body_of(handler(make_event("GET")))

        assert len(listed) == len(emails)
        assert {user["email"] for user in listed} == emails

    def test_idempotent_reads(self, handler, make_event):
        handler(make_event("POST", body={"email": "a@x.com", "username": "Ann"}))
        handler(make_event("POST", body={"email": "b@x.com"}))

        assert handler(make_event("GET")) == handler(make_event("GET"))
        lookup = make_event("GET", query={"email": "a@x.com"})
        assert handler(lookup) == handler(lookup)

    def test_repeated_creates_only_first_succeeds(self, handler, make_event):
        statuses = [
            handler(make_event("POST", body={"email": "a@x.com", "username": f"n{i}"}))["statusCode"]
            for i in range(5)
        ]

        assert statuses == [201, 409, 409, 409, 409]

    @pytest.mark.parametrize("method", ["PUT", "DELETE", "PATCH"])
    def test_method_gating_has_no_side_effects(self, handler, make_event, users_table, method):
        response = handler(make_event(method, body={"email": "a@x.com"}))

        assert response == {"statusCode": 405}
        assert users_table.scan()["Items"] == []

    def test_blank_email_query_lists(self, handler, make_event):
        handler(make_event("POST", body={"email": "a@x.com"}))

        response = handler(make_event("GET", query={"email": "  "}))

        assert body_of(response) == [{"email": "a@x.com"}]


class TestStoreFailures:

    def test_missing_table_raises(self, registry_config, mock_dynamodb_resource, make_event):
        """Without the table every request fails loudly instead of returning a status."""
        from user_registry import RegistryContext, TransportError, make_handler

        handler = make_handler(RegistryContext.from_config(registry_config))

        with pytest.raises(TransportError, match="Table not found"):
            handler(make_event("GET", query={"email": "a@x.com"}))

        with pytest.raises(TransportError):
            handler(make_event("POST", body={"email": "a@x.com"}))
