"""Registry of translation and dictionary service descriptors."""

from __future__ import annotations

from dataclasses import dataclass
from functools import partial
from typing import Callable, Dict, Literal, Optional, Sequence

from .validation import (
    CHECK_CONNECTIVITY,
    INVALID_KEY_FORMAT,
    SECRET_NOT_SET,
    SecretInput,
    SecretPart,
    ValidationResult,
    ValidatorSpec,
    always_accept,
    check_secret,
    delimited_parts,
    fixed_length,
    non_empty,
    pattern_match,
    structured_or_legacy,
)

ServiceType = Literal["word", "sentence"]
SERVICE_TYPES: tuple[str, ...] = ("word", "sentence")
_ACCEPT_ANY = always_accept()


@dataclass(frozen=True, slots=True)
class ServiceDescriptor:
    """A translation backend (``sentence``) or dictionary lookup (``word``)."""

    type: ServiceType
    id: str
    default_secret: Optional[str] = None
    validator: Optional[ValidatorSpec] = None

    @property
    def secret_validator(self) -> Optional[Callable[[SecretInput], ValidationResult]]:
        if self.validator is None:
            return None
        return partial(check_secret, self.validator, default_secret=self.default_secret)

    def validate_secret(self, secret: SecretInput) -> ValidationResult:
        """Validate ``secret``; services without a policy accept anything."""
        return check_secret(self.validator or _ACCEPT_ANY, secret, default_secret=self.default_secret)

    def to_dict(self) -> Dict[str, object]:
        return {
            "type": self.type,
            "id": self.id,
            "default_secret": self.default_secret,
            "validator": self.validator.kind.value if self.validator else None,
        }


_ACCESS_KEY_PARTS = (SecretPart("AccessKeyId"), SecretPart("AccessKeySecret"))


SERVICES: tuple[ServiceDescriptor, ...] = (
    # API key is optional for LibreTranslate.
    ServiceDescriptor("sentence", "libretranslate", "", always_accept()),
    ServiceDescriptor("sentence", "googleapi"),
    ServiceDescriptor("sentence", "google"),
    ServiceDescriptor("sentence", "cnki"),
    ServiceDescriptor("sentence", "haici"),
    ServiceDescriptor("sentence", "youdao"),
    ServiceDescriptor("sentence", "bing"),
    ServiceDescriptor("sentence", "pot"),
    ServiceDescriptor(
        "sentence",
        "huoshan",
        "accessKeyId#accessKeySecret",
        delimited_parts("Huoshan Text Translation", "AccessKeyId#AccessKeySecret", (2,), _ACCESS_KEY_PARTS),
    ),
    ServiceDescriptor(
        "sentence",
        "youdaozhiyun",
        "appid#appsecret#vocabid(optional)",
        delimited_parts(
            "YoudaoZhiyun",
            "AppID#AppKey#VocabID(optional)",
            (2, 3),
            (SecretPart("AppID"), SecretPart("AppKey"), SecretPart("VocabID", default="")),
        ),
    ),
    ServiceDescriptor(
        "sentence",
        "niutranspro",
        "",
        fixed_length(
            "The secret is your NiuTrans API-KEY. The secret length must be 32, but got {length}.",
            lengths=(32,),
        ),
    ),
    ServiceDescriptor(
        "sentence",
        "microsoft",
        "",
        fixed_length(
            "The secret is your Azure translate serviceKEY#region(required if the region is not global). "
            "The secretKEY length must be 32 or 84, but got {length}.",
            lengths=(32, 84),
            first_segment_only=True,
        ),
    ),
    ServiceDescriptor("sentence", "caiyun", "3975l6lr5pcbvidl6jl2", non_empty()),
    ServiceDescriptor(
        "sentence",
        "deeplfree",
        "",
        fixed_length(
            "The secret is your DeepL (free plan) KEY. The secret length must >= 36, but got {length}.",
            min_length=36,
        ),
    ),
    ServiceDescriptor(
        "sentence",
        "deeplpro",
        "",
        fixed_length(
            "The secret is your DeepL (pro plan) KEY. The secret length must >= 36, but got {length}.",
            min_length=36,
        ),
    ),
    ServiceDescriptor("sentence", "deeplcustom", "", always_accept()),
    ServiceDescriptor("sentence", "deeplx"),
    ServiceDescriptor(
        "sentence",
        "aliyun",
        "accessKeyId#accessKeySecret",
        delimited_parts("Aliyun Text Translation", "AccessKeyId#AccessKeySecret", (2,), _ACCESS_KEY_PARTS),
    ),
    ServiceDescriptor(
        "sentence",
        "baidu",
        "appid#key#3",
        delimited_parts(
            "Baidu Text Translation",
            "AppID#Key#Action(optional)",
            (2, 3),
            (SecretPart("AppID"), SecretPart("Key"), SecretPart("Action", default="0")),
        ),
    ),
    ServiceDescriptor(
        "sentence",
        "baidufield",
        "appid#key#field",
        delimited_parts(
            "Baidu Domain Text Translation",
            "AppID#Key#DomainCode",
            (3,),
            (SecretPart("AppID"), SecretPart("Key"), SecretPart("DomainCode")),
        ),
    ),
    ServiceDescriptor(
        "sentence",
        "openl",
        "service1,service2,...#apikey",
        delimited_parts(
            "OpenL",
            "service1,service2,...#APIKey",
            (2,),
            (SecretPart("Services"), SecretPart("APIKey")),
        ),
    ),
    ServiceDescriptor(
        "sentence",
        "tencent",
        "secretId#SecretKey#Region(default ap-shanghai)#ProjectId(default 0)",
        structured_or_legacy(),
    ),
    ServiceDescriptor(
        "sentence",
        "xftrans",
        "AppID#ApiSecret#ApiKey",
        delimited_parts(
            "Xftrans Domain Text Translation",
            "AppID#ApiSecret#ApiKey",
            (3,),
            (SecretPart("AppID"), SecretPart("ApiSecret"), SecretPart("ApiKey")),
        ),
    ),
    ServiceDescriptor("sentence", "chatgpt", "", pattern_match(r"sk-[A-Za-z0-9_-]{32,}", INVALID_KEY_FORMAT)),
    ServiceDescriptor("sentence", "customgpt1", "", non_empty(CHECK_CONNECTIVITY, INVALID_KEY_FORMAT)),
    ServiceDescriptor("sentence", "customgpt2", "", non_empty(CHECK_CONNECTIVITY, INVALID_KEY_FORMAT)),
    ServiceDescriptor("sentence", "customgpt3", "", non_empty(CHECK_CONNECTIVITY, INVALID_KEY_FORMAT)),
    ServiceDescriptor("sentence", "azuregpt", "", non_empty(empty_info=SECRET_NOT_SET)),
    ServiceDescriptor("sentence", "gemini", "", non_empty(empty_info=SECRET_NOT_SET)),
    ServiceDescriptor("sentence", "qwenmt", "", non_empty(empty_info=SECRET_NOT_SET)),
    ServiceDescriptor(
        "sentence",
        "claude",
        "",
        pattern_match(
            r"sk-ant-[A-Za-z0-9]{24,}",
            "The Claude API key format might be invalid. Typically starts with 'sk-ant-'.",
            lenient=True,
        ),
    ),
    # Token is optional for MTranServer.
    ServiceDescriptor("sentence", "mtranserver", "", always_accept()),
    ServiceDescriptor("word", "bingdict"),
    ServiceDescriptor("word", "cambridgedict"),
    ServiceDescriptor("word", "haicidict"),
    ServiceDescriptor("word", "youdaodict"),
    ServiceDescriptor("word", "freedictionaryapi"),
    ServiceDescriptor("word", "webliodict"),
    ServiceDescriptor("word", "collinsdict"),
)


def index_services(services: Sequence[ServiceDescriptor]) -> Dict[str, ServiceDescriptor]:
    by_id: Dict[str, ServiceDescriptor] = {}
    for service in services:
        if service.type not in SERVICE_TYPES:
            raise ValueError(f"Unknown service type {service.type!r} for {service.id}")
        if service.id in by_id:
            raise ValueError(f"Duplicate service id: {service.id}")
        by_id[service.id] = service
    return by_id


_SERVICES_BY_ID = index_services(SERVICES)


def get_service(service_id: str) -> ServiceDescriptor:
    """Return the descriptor for ``service_id``; unknown ids raise ``KeyError``."""
    return _SERVICES_BY_ID[service_id]
