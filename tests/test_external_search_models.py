"""Tests for shared external search models."""

from __future__ import annotations

from extsearch.models import (
    EntityCode,
    EntityMetadata,
    EntityType,
    ExternalSearchRequest,
)


class TestEntityCode:
    def test_create_lower_cases_value(self) -> None:
        code = EntityCode.create(EntityType.USER, "cluedin:email", "Ann@CluedIn.com")
        assert code.value == "ann@cluedin.com"
        assert code.key == "/Infrastructure/User#cluedin:email:ann@cluedin.com"

    def test_codes_are_hashable_and_deduplicate(self) -> None:
        a = EntityCode.create(EntityType.USER, "cluedin:email", "A@x.com")
        b = EntityCode.create(EntityType.USER, "cluedin:email", "a@X.com")
        assert {a, b} == {a}


class TestExternalSearchRequest:
    def test_from_entity_reads_core_properties(self) -> None:
        metadata = EntityMetadata(
            entity_type=EntityType.PERSON,
            name="anncluedin",
            properties={
                "user.email": "ann@cluedin.com",
                "user.emailAddresses": "a@x.com;b@x.com",
            },
        )
        request = ExternalSearchRequest.from_entity(metadata)
        assert request.query_parameters.email == "ann@cluedin.com"
        assert request.query_parameters.email_addresses == {"a@x.com", "b@x.com"}

    def test_from_entity_without_properties(self) -> None:
        request = ExternalSearchRequest.from_entity(EntityMetadata(entity_type=EntityType.PERSON))
        assert request.query_parameters.email is None
        assert request.query_parameters.email_addresses == set()

    def test_result_key_prefers_caller_key(self) -> None:
        code = EntityCode.create(EntityType.PERSON, "crm", "42")
        metadata = EntityMetadata(
            entity_type=EntityType.PERSON, name="Ann", origin_entity_code=code
        )
        request = ExternalSearchRequest(entity_metadata=metadata, entity_key="host-7")
        assert request.result_key == "host-7"

    def test_result_key_falls_back_to_origin_code(self) -> None:
        code = EntityCode.create(EntityType.PERSON, "crm", "42")
        metadata = EntityMetadata(
            entity_type=EntityType.PERSON, name="Ann", origin_entity_code=code
        )
        assert ExternalSearchRequest(entity_metadata=metadata).result_key == code.key

    def test_result_key_is_none_without_identity(self) -> None:
        metadata = EntityMetadata(entity_type=EntityType.PERSON, name="Ann")
        assert ExternalSearchRequest(entity_metadata=metadata).result_key is None

    def test_from_entity_carries_entity_key(self) -> None:
        metadata = EntityMetadata(entity_type=EntityType.PERSON)
        assert ExternalSearchRequest.from_entity(metadata, "host-7").result_key == "host-7"
