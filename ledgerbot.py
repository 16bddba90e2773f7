import asyncio
import logging
import sqlite3

import discord
from discord.ext import commands
from dotenv import load_dotenv

from config.settings import Settings
from src.repositories.account_store import AccountStore
from src.repositories.storage_repo import StorageRepository
from src.services.dashboard import Dashboard
from src.services.ledger_actions import LedgerActions
from src.services.ledger_service import LedgerService
from src.services.notifier import Notifier

logger = logging.getLogger('discord')
logger.setLevel(logging.DEBUG)
handler = logging.FileHandler(filename='discord.log', encoding='utf-8', mode='w')
handler.setFormatter(logging.Formatter('%(asctime)s:%(levelname)s:%(name)s: %(message)s'))
logger.addHandler(handler)

ledger_logger = logging.getLogger('src')
ledger_logger.setLevel(logging.INFO)
ledger_logger.addHandler(handler)

load_dotenv()

settings = Settings.load()

extensions = (
    "cogs.ledgercmd",
    )

intents = discord.Intents.default()
intents.message_content = True


class LedgerBot(commands.Bot):
    def __init__(self, *args, settings: Settings, **kwargs):
        super().__init__(*args, **kwargs)
        self.settings = settings
        self.conn = sqlite3.connect(settings.db_path)
        storage = StorageRepository(self.conn)
        storage.create_table()
        self.store = AccountStore(storage, key=settings.storage_key, strict=settings.strict_storage)
        self.ledger = LedgerService(
            self.store,
            savings_minimum=settings.savings_minimum,
            current_minimum=settings.current_minimum,
        )
        self.dashboard = Dashboard(self.store)
        self.notifier = None
        self.actions = None

    async def setup_hook(self):
        # the notifier's timer must run on the bot's event loop
        loop = asyncio.get_running_loop()
        self.notifier = Notifier(self.settings.notification_seconds, scheduler=loop.call_later)
        self.actions = LedgerActions(
            self.ledger, self.notifier, self.dashboard, currency_symbol=self.settings.currency_symbol
        )
        for extension in extensions:
            await self.load_extension(extension)

    async def close(self):
        await super().close()
        self.conn.close()


bot = LedgerBot(
    command_prefix=settings.command_prefix,
    owner_id=settings.owner_id,
    intents=intents,
    settings=settings,
)

bot.run(settings.discord_token)
