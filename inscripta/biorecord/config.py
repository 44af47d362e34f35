"""
Configuration of the NCBI Entrez connection. NCBI asks every client to identify itself with an email address, and
allows a higher request rate to clients with an API key.

Values are read from the environment:

.. code-block::

    BIORECORD_ENTREZ_EMAIL
    BIORECORD_ENTREZ_API_KEY
    BIORECORD_ENTREZ_TOOL
    BIORECORD_ENTREZ_MAX_TRIES
    BIORECORD_ENTREZ_SLEEP_BETWEEN_TRIES
"""
import os
from dataclasses import field
from typing import ClassVar, Type, Optional, Mapping

from marshmallow import Schema, ValidationError, validate
from marshmallow_dataclass import dataclass

from inscripta.biorecord.exc import ConfigurationError

ENV_PREFIX = "BIORECORD_ENTREZ_"


@dataclass
class EntrezConfig:
    """Settings applied to ``Bio.Entrez`` before any request is made. Retries are performed by Biopython."""

    Schema: ClassVar[Type[Schema]] = Schema  # noqa: F811

    email: Optional[str] = None
    api_key: Optional[str] = None
    tool: str = "biorecord"
    max_tries: int = field(default=3, metadata=dict(validate=validate.Range(min=1)))
    sleep_between_tries: int = field(default=15, metadata=dict(validate=validate.Range(min=0)))

    @staticmethod
    def from_mapping(values: Mapping[str, str]) -> "EntrezConfig":
        """Load settings from a mapping of lower case field names, validating them through the schema.

        Raises:
            ConfigurationError: If a value does not validate.
        """
        try:
            return EntrezConfig.Schema().load(values)
        except ValidationError as e:
            raise ConfigurationError("Invalid Entrez configuration: {}".format(e.messages)) from e

    @staticmethod
    def from_env(environ: Optional[Mapping[str, str]] = None) -> "EntrezConfig":
        """Load settings from ``BIORECORD_ENTREZ_*`` environment variables. Unset variables keep their defaults."""
        environ = os.environ if environ is None else environ
        values = {
            key[len(ENV_PREFIX) :].lower(): value for key, value in environ.items() if key.startswith(ENV_PREFIX)
        }
        return EntrezConfig.from_mapping(values)
