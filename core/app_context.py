import logging
from dataclasses import dataclass

from core.config_loader import AppConfig
from core.templates.service import ContractRenderer
from database.database import Database

logger = logging.getLogger(__name__)


@dataclass
class AppContext:
    """Application context container that holds all wired dependencies.

    The database handle is built here and passed down; there is no
    module-level engine. DB access should be obtained via hr_uow(database)
    or a request-scoped session.
    """
    config: AppConfig
    database: Database
    renderer: ContractRenderer

    @classmethod
    def build(cls, config: AppConfig) -> "AppContext":
        """Build an AppContext from config.

        Args:
            config: Loaded application configuration

        Returns:
            Fully wired AppContext instance
        """
        database = Database(config.database.url, echo=config.database.echo)
        renderer = ContractRenderer(config.contracts)

        logger.info(
            f"Contract rendering: variant={config.contracts.html_variant}, "
            f"strict={config.contracts.strict_templates}"
        )

        return cls(
            config=config,
            database=database,
            renderer=renderer,
        )

    def close(self) -> None:
        self.database.dispose()
