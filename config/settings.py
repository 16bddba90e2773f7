"""Configuration management for the account ledger bot."""
import os
from dataclasses import dataclass


@dataclass
class Settings:
    """Configuration settings for the account ledger bot.

    Business rules, storage location and bot options live here so the
    entry script is the only place that reads the environment.
    """

    # Discord Configuration (required)
    discord_token: str

    # Storage Configuration
    db_path: str = 'ledger.db'
    storage_key: str = 'bankAccounts'
    strict_storage: bool = False

    # Business Rules
    savings_minimum: int = 500
    current_minimum: int = 1000

    # Presentation
    command_prefix: str = '$'
    notification_seconds: float = 4.0
    currency_symbol: str = '₹'

    # Owner Configuration
    owner_id: int | None = None
    admin_role_name: str = 'Admin'

    @classmethod
    def load(cls) -> 'Settings':
        """Load settings from environment variables.

        Returns:
            Settings: A Settings instance with values from environment variables.

        Raises:
            ValueError: If required environment variables are not set.
        """
        discord_token = os.getenv('DISCORD_TOKEN')
        if not discord_token:
            raise ValueError("DISCORD_TOKEN environment variable is required")

        owner_id = os.getenv('OWNER_ID')

        return cls(
            discord_token=discord_token,
            db_path=os.getenv('LEDGER_DB_PATH', 'ledger.db'),
            strict_storage=os.getenv('LEDGER_STRICT_STORAGE', 'false').lower() == 'true',
            owner_id=int(owner_id) if owner_id else None,
        )
