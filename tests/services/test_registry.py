import pytest

from polytranslate.services.registry import SERVICES, ServiceDescriptor, get_service, index_services
from polytranslate.services.validation import ValidatorKind, always_accept


def test_registry_ids_are_unique() -> None:
    ids = [service.id for service in SERVICES]
    assert len(ids) == len(set(ids)) == 39


def test_registry_partitions_word_and_sentence_services() -> None:
    words = [service.id for service in SERVICES if service.type == "word"]
    assert words == [
        "bingdict",
        "cambridgedict",
        "haicidict",
        "youdaodict",
        "freedictionaryapi",
        "webliodict",
        "collinsdict",
    ]
    assert all(service.type in ("word", "sentence") for service in SERVICES)


def test_get_service_returns_matching_descriptor() -> None:
    service = get_service("baidu")
    assert service.id == "baidu"
    assert service.type == "sentence"
    assert service.validator is not None
    assert service.validator.kind is ValidatorKind.DELIMITED_PARTS


def test_get_service_unknown_id_is_a_caller_error() -> None:
    with pytest.raises(KeyError):
        get_service("babelfish")


def test_services_without_policy_have_no_validator() -> None:
    google = get_service("google")
    assert google.secret_validator is None
    result = google.validate_secret("anything")
    assert result.status is True
    assert result.secret == "anything"


def test_secret_validator_is_callable() -> None:
    validator = get_service("chatgpt").secret_validator
    assert validator is not None
    assert validator("").info == "The secret is not set."


def test_index_services_rejects_duplicates() -> None:
    duplicated = [ServiceDescriptor("sentence", "same"), ServiceDescriptor("word", "same")]
    with pytest.raises(ValueError):
        index_services(duplicated)


def test_index_services_rejects_unknown_type() -> None:
    with pytest.raises(ValueError):
        index_services([ServiceDescriptor("phrase", "odd", "", always_accept())])


def test_to_dict_reports_validator_kind() -> None:
    assert get_service("tencent").to_dict() == {
        "type": "sentence",
        "id": "tencent",
        "default_secret": "secretId#SecretKey#Region(default ap-shanghai)#ProjectId(default 0)",
        "validator": "structured_or_legacy",
    }
