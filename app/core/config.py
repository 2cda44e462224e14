"""
Configuracion central de la aplicacion.
Gestiona variables de entorno y configuraciones globales.
Las credenciales de SureMDM y la ruta del CSV de propiedades se
leen del entorno (o de un archivo .env en desarrollo).
"""
from pydantic_settings import BaseSettings
from pydantic import Field, computed_field


class Settings(BaseSettings):
    """
    Clase de configuracion de la aplicacion.
    Lee variables de entorno y proporciona valores por defecto.

    Grupos de configuracion:
    - Aplicacion/servidor: nombre, version, host y puerto
    - SureMDM: URL base, usuario, password y API key del proveedor MDM
    - Propiedades: ruta del CSV y politica de carga del cache
    - Logging: nivel, archivo principal y carpeta de auditoria
    """

    # Configuracion de la aplicacion
    APP_NAME: str = Field(default="SureMDM Webhook Enricher")
    APP_VERSION: str = Field(default="1.0.0")
    DEBUG: bool = Field(default=False)
    ENVIRONMENT: str = Field(default="production")

    # Configuracion del servidor
    HOST: str = Field(default="0.0.0.0")
    PORT: int = Field(default=8000)

    # SureMDM - API del proveedor MDM
    SUREMDM_API_URL: str = Field(default="")
    SUREMDM_API_USERNAME: str = Field(default="")
    SUREMDM_API_PASSWORD: str = Field(default="")
    SUREMDM_API_KEY: str = Field(default="")
    SUREMDM_TIMEOUT_SECONDS: float = Field(default=30.0)

    # Tipo de evento que indica que el dispositivo fue eliminado en SureMDM
    SUREMDM_DELETE_EVENT_TYPE: str = Field(default="Device Deletion")

    # CSV de propiedades personalizadas (relativo al directorio de trabajo)
    PROPERTIES_CSV_PATH: str = Field(default="data/propExport.csv")
    PROPERTIES_PRELOAD: bool = Field(default=False)
    # Si True, una carga fallida no queda cacheada y se reintenta en el siguiente request
    PROPERTIES_RETRY_FAILED_LOAD: bool = Field(default=False)

    # Logging
    LOG_LEVEL: str = Field(default="INFO")
    LOG_FILE: str = Field(default="logs/app.log")
    AUDIT_LOG_DIR: str = Field(default="logs/webhook_logs")

    @computed_field
    @property
    def is_development(self) -> bool:
        """Indica si el entorno es de desarrollo."""
        return self.ENVIRONMENT.lower() == "development"

    @computed_field
    @property
    def suremdm_configured(self) -> bool:
        """Indica si estan presentes todas las credenciales de SureMDM."""
        return all([
            self.SUREMDM_API_URL,
            self.SUREMDM_API_USERNAME,
            self.SUREMDM_API_PASSWORD,
            self.SUREMDM_API_KEY,
        ])

    @computed_field
    @property
    def suremdm_base_url(self) -> str:
        """URL base de SureMDM sin la barra final."""
        return self.SUREMDM_API_URL.rstrip("/")

    class Config:
        """Configuracion de Pydantic."""
        env_file = ".env"
        case_sensitive = True
        extra = "ignore"  # Ignorar campos extra del .env


# Instancia global de configuracion
settings = Settings()
