from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings

from poweroutages.schemas.environment import DEFAULT_API_URL, OutageEnvironment


class Settings(BaseSettings):
    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "populate_by_name": True}

    # Upstream outage API and query filters. The spaced names match the keys
    # the ETL layer configuration uses.
    api_url: str = Field(default=DEFAULT_API_URL, validation_alias=AliasChoices("API_URL", "api_url"))
    min_customers: str = Field(
        default="0", validation_alias=AliasChoices("Min Customers", "MIN_CUSTOMERS", "min_customers")
    )
    utility_filter: str | None = Field(
        default=None, validation_alias=AliasChoices("Utility Filter", "UTILITY_FILTER", "utility_filter")
    )
    outage_type: str | None = Field(
        default=None, validation_alias=AliasChoices("Outage Type", "OUTAGE_TYPE", "outage_type")
    )

    # HTTP client timeout (seconds)
    request_timeout: float = Field(default=15.0)

    # Downstream feature sink. Empty submit_url logs the collection instead.
    submit_url: str = Field(default="")
    submit_token: str = Field(default="")

    # Scheduler interval (minutes)
    ingest_interval: int = Field(default=10)

    # Remarks are written in local time for the upstream region
    display_timezone: str = Field(default="Pacific/Auckland")

    log_level: str = Field(default="INFO")

    def environment(self, overrides: dict | None = None) -> OutageEnvironment:
        """Build the ETL environment from settings, with optional per-run overrides.

        Overrides use the external key names (``API_URL``, ``Min Customers``, ...).
        """
        values = {
            "API_URL": self.api_url,
            "Min Customers": self.min_customers,
            "Utility Filter": self.utility_filter,
            "Outage Type": self.outage_type,
        }
        if overrides:
            values.update({k: v for k, v in overrides.items() if k in values})
        return OutageEnvironment.model_validate(values)


settings = Settings()
