from pydantic_settings import BaseSettings, SettingsConfigDict


class FirebaseConfig(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="FIREBASE_")

    # Name of the env var holding the service-account file path.
    # Unset means application default credentials.
    credential_env_var: str | None = None
    project_id: str | None = None
    app_name: str = "fcm-operation"


class OperationConfig(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="FCM_OPERATION_")

    host: str = "0.0.0.0"
    port: int = 8000
    log_level: str = "INFO"
