"""Multi-source configuration and credential resolution.

Resolution order (highest to lowest priority):
1. Explicitly provided value
2. Environment variable
3. .env file (python-dotenv, loaded into the environment)
4. Default value

Example:
    ```python
    from github_client_core.auth import CredentialResolver

    resolver = CredentialResolver()
    credentials = resolver.resolve_credentials()  # GITHUB_TOKEN, GITHUB_CLIENT_ID/SECRET
    ```

Security Considerations:
    - Credential values are never logged (masked with ***)
    - File-based secrets have whitespace stripped
"""

import logging
import os
from pathlib import Path
from threading import Lock

from dotenv import load_dotenv

from github_client_core.auth.credentials import ClientCredentials, Credentials, TokenCredentials
from github_client_core.auth.exceptions import CredentialFileError, CredentialNotFoundError

logger = logging.getLogger(__name__)

TOKEN_ENV_VAR = "GITHUB_TOKEN"
TOKEN_FILE_ENV_VAR = "GITHUB_TOKEN_FILE"
CLIENT_ID_ENV_VAR = "GITHUB_CLIENT_ID"
CLIENT_SECRET_ENV_VAR = "GITHUB_CLIENT_SECRET"


class CredentialResolver:
    """Resolve settings and credentials from explicit values, the environment and .env files."""

    def __init__(self, dotenv_path: str | None = None, load_dotenv: bool = True):
        """Initialize the resolver.

        Args:
            dotenv_path: Path to .env file. If None, python-dotenv searches
                parent directories.
            load_dotenv: Whether to load the .env file at all.
        """
        self._dotenv_loaded = False
        self._dotenv_lock = Lock()
        self._dotenv_path = dotenv_path
        self._load_dotenv_enabled = load_dotenv

        if self._load_dotenv_enabled:
            self._ensure_dotenv_loaded()

    def _ensure_dotenv_loaded(self) -> None:
        if self._dotenv_loaded:
            return

        with self._dotenv_lock:
            if self._dotenv_loaded:
                return

            try:
                load_dotenv(dotenv_path=self._dotenv_path)
                logger.debug("Loaded .env file for credential resolution")
            except OSError as e:
                logger.warning(f"Failed to load .env file: {e}")
            self._dotenv_loaded = True

    def resolve(
        self,
        *,
        value: str | None = None,
        env_var_name: str | None = None,
        default: str | None = None,
        required: bool = False,
        mask_in_logs: bool = True,
    ) -> str | None:
        """Resolve a single setting.

        Args:
            value: Explicit value; wins over every other source.
            env_var_name: Environment variable to consult.
            default: Fallback when nothing else is set.
            required: Raise instead of returning None.
            mask_in_logs: Log ``***`` instead of the resolved value.

        Raises:
            CredentialNotFoundError: If required and not found.
        """
        result = None
        source = None

        if value is not None:
            result, source = value, "explicit parameter"
        elif env_var_name and env_var_name in os.environ:
            result, source = os.environ[env_var_name], f"environment variable '{env_var_name}'"
        elif default is not None:
            result, source = default, "default value"

        if result is not None:
            shown = "***" if mask_in_logs else result
            logger.debug(f"Resolved setting from {source}: {shown}")

        if required and result is None:
            error_msg = "Required credential not found"
            if env_var_name:
                error_msg += f" (checked env var: {env_var_name})"
            raise CredentialNotFoundError(error_msg, env_var_name=env_var_name)

        return result

    def resolve_from_file(
        self,
        *,
        file_path: str | Path | None = None,
        env_var_name: str | None = None,
        required: bool = False,
    ) -> str | None:
        """Read a secret from a file whose path is given directly or via ``env_var_name``.

        Supports ``~`` and ``$VAR`` expansion in the path.

        Raises:
            CredentialFileError: If required and the file cannot be read.
        """
        path_to_use = str(file_path) if file_path is not None else None
        if path_to_use is None and env_var_name:
            path_to_use = self.resolve(env_var_name=env_var_name, mask_in_logs=False)

        if path_to_use is None:
            if required:
                error_msg = "No file path provided for credential resolution"
                if env_var_name:
                    error_msg += f" (env var '{env_var_name}' not set)"
                raise CredentialFileError(error_msg)
            return None

        path_obj = Path(os.path.expanduser(os.path.expandvars(path_to_use)))

        try:
            content = path_obj.read_text().strip()
        except FileNotFoundError:
            error_msg = f"Credential file not found: {path_obj}"
            if required:
                raise CredentialFileError(error_msg) from None
            logger.debug(error_msg)
            return None
        except OSError as e:
            error_msg = f"Error reading credential file {path_obj}: {e}"
            if required:
                raise CredentialFileError(error_msg) from e
            logger.warning(error_msg)
            return None

        logger.debug(f"Resolved credential from file: {path_obj} (***)")
        return content

    def resolve_credentials(
        self,
        *,
        token: str | None = None,
        client_id: str | None = None,
        client_secret: str | None = None,
        required: bool = False,
    ) -> Credentials:
        """Resolve which credential variant a client should use.

        A token (explicit, ``GITHUB_TOKEN``, or the file named by
        ``GITHUB_TOKEN_FILE``) wins over an OAuth client id/secret pair.

        Raises:
            CredentialNotFoundError: If required and neither variant is configured,
                or only half of the client id/secret pair is.
        """
        resolved_token = self.resolve(value=token or None, env_var_name=TOKEN_ENV_VAR)
        if not resolved_token:
            resolved_token = self.resolve_from_file(env_var_name=TOKEN_FILE_ENV_VAR)
        if resolved_token:
            return TokenCredentials(resolved_token)

        resolved_id = self.resolve(value=client_id or None, env_var_name=CLIENT_ID_ENV_VAR, mask_in_logs=False)
        resolved_secret = self.resolve(value=client_secret or None, env_var_name=CLIENT_SECRET_ENV_VAR)
        if resolved_id and resolved_secret:
            return ClientCredentials(resolved_id, resolved_secret)
        if resolved_id or resolved_secret:
            missing = CLIENT_SECRET_ENV_VAR if resolved_id else CLIENT_ID_ENV_VAR
            raise CredentialNotFoundError(f"Incomplete OAuth client credentials (missing {missing})", env_var_name=missing)

        if required:
            raise CredentialNotFoundError(
                f"No credentials found (checked {TOKEN_ENV_VAR}, {TOKEN_FILE_ENV_VAR}, {CLIENT_ID_ENV_VAR})",
                env_var_name=TOKEN_ENV_VAR,
            )
        logger.debug("No credentials configured, requests will be unauthenticated")
        return None
