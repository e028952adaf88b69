"""AWS Secrets Manager utilities."""

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from etl_drone_sense.exceptions.configuration_errors import (
    ConfigurationError,
    MissingCredentialError,
)


class SecretsClient:
    """Wrapper around Secrets Manager reads."""

    def __init__(self, region_name: str) -> None:
        """Initialize the Secrets Manager client.

        Args:
            region_name: AWS region of the secrets.
        """
        self._secrets = boto3.client("secretsmanager", region_name=region_name)  # type: ignore[call-overload]

    def get_secret_string(self, secret_id: str) -> str:
        """Read the string value of a secret.

        Args:
            secret_id: Secret name or ARN.

        Returns:
            The secret string, stripped of surrounding whitespace.

        Raises:
            MissingCredentialError: If the secret does not exist or has no string value.
            ConfigurationError: If the secret cannot be read.
        """
        try:
            response = self._secrets.get_secret_value(SecretId=secret_id)
        except self._secrets.exceptions.ResourceNotFoundException as error:
            raise MissingCredentialError(
                f"Secret not found: {secret_id}",
                secret_id=secret_id,
            ) from error
        except (ClientError, BotoCoreError) as error:
            raise ConfigurationError(
                f"Failed to read secret {secret_id}: {error}",
                context={"secret_id": secret_id},
            ) from error

        secret: str | None = response.get("SecretString")
        if not secret:
            raise MissingCredentialError(
                f"Secret has no string value: {secret_id}",
                secret_id=secret_id,
            )
        return secret.strip()
