from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Form defaults
    DEFAULT_SUBMIT_BUTTON_TEXT: str = "Submit Form"
    DEFAULT_SUCCESS_MESSAGE: str = "Thank you! Your form has been submitted successfully."
    DEFAULT_ALLOW_BACK: bool = True
    DEFAULT_SHOW_PROGRESS: bool = True

    # Import / export
    IMPORTED_FORM_ID_PREFIX: str = "imported-form"
    IMPORTED_FORM_TITLE: str = "Imported Form"
    EXPORT_INDENT: int = 2
    STRICT_IMPORT: bool = False

    model_config = SettingsConfigDict(
        env_prefix="FORMENGINE_",
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )


settings = Settings()
