import re

from django.core.exceptions import ValidationError
from django.core.validators import RegexValidator
from django.utils.regex_helper import _lazy_re_compile
from django.utils.translation import gettext_lazy as _

from resources.dataclasses import ParseResult, Resource


class AbsoluteURLValidator(RegexValidator):
    """
    Syntactic check for an absolute URL of any scheme.

    Schemes with an authority part (http, https, ftp, ws, wss) also need a
    non-empty host, but the host may be a single label such as ``https://foo``.
    """

    regex = _lazy_re_compile(r"^[a-z][a-z0-9+.\-]*:\S+$", re.IGNORECASE)
    host_regex = _lazy_re_compile(
        r"^(?:https?|ftp|wss?)://"
        r"(?:[^\s/?#@]*@)?"  # user:pass@
        r"(?:\[[0-9a-f:.]+\]|[^\s/?#@:\[\]]+)"  # host or [ipv6]
        r"(?::\d*)?"  # port
        r"(?:[/?#]\S*)?$",
        re.IGNORECASE,
    )
    authority_schemes = {"http", "https", "ftp", "ws", "wss"}
    message = _("%(value)s is not a valid absolute URL.")
    code = "invalid_url"

    def __call__(self, value):
        super().__call__(value)
        scheme = value.split(":", 1)[0].lower()
        if scheme in self.authority_schemes and not self.host_regex.match(value):
            raise ValidationError(self.message, code=self.code, params={"value": value})


url_validator = AbsoluteURLValidator()


def validate_url(value):
    if not isinstance(value, str):
        raise ValidationError(_("url must be a string."))
    url_validator(value)


def parse_resource(item):
    """
    Build a Resource from one decoded JSON element.

    Raises ValidationError naming the offending field.
    """
    if not isinstance(item, dict):
        raise ValidationError(_("Each resource must be an object."))
    if "url" not in item:
        raise ValidationError(_("url is required."))
    validate_url(item["url"])

    if "description" not in item:
        raise ValidationError(_("description is required, use null for none."))
    description = item["description"]
    if description is not None and not isinstance(description, str):
        raise ValidationError(_("description must be a string or null."))

    return Resource(url=item["url"], description=description)


def parse_resources(data) -> ParseResult:
    """
    Parse the decoded contents of a resources file.

    Never raises for bad data; a failed parse is reported through
    ParseResult.error with the position of the first invalid element.
    """
    if not isinstance(data, list):
        return ParseResult(error="Expected a list of resources.")

    resources = []
    for index, item in enumerate(data):
        try:
            resources.append(parse_resource(item))
        except ValidationError as e:
            return ParseResult(error=f"Resource {index}: {' '.join(e.messages)}")
    return ParseResult(resources=tuple(resources))
