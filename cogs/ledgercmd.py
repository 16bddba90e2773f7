import asyncio
import logging

import discord
from discord.ext import commands

from src.models.notification import Notification
from src.services.formatting import format_money, render_account, render_accounts

logger = logging.getLogger('discord')


def check_admin_role(ctx):
    role_name = ctx.bot.settings.admin_role_name
    roles = getattr(ctx.author, 'roles', [])
    return (ctx.author.id == ctx.bot.owner_id) or (role_name in [role.name for role in roles])


class LedgerCommands(commands.Cog):
    def __init__(self, bot):
        self.bot = bot
        self._channel = None
        self._shown = None
        self._tasks = set()
        bot.notifier.on_show(self._on_show)
        bot.notifier.on_dismiss(self._on_dismiss)

    # notifier listeners run synchronously inside the actions, so the
    # actual sending is handed to the event loop
    def _on_show(self, notification: Notification):
        # a newer notification replaces the one on screen
        self._clear_shown()
        if self._channel is None:
            return
        self._shown = self._spawn(self._send_notification(self._channel, notification))

    def _on_dismiss(self, notification: Notification):
        self._clear_shown()

    def _clear_shown(self):
        if self._shown is not None:
            self._spawn(self._delete_notification(self._shown))
            self._shown = None

    def _spawn(self, coro):
        # the loop keeps only weak references to tasks
        task = asyncio.create_task(coro)
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
        return task

    async def _send_notification(self, channel, notification):
        prefix = '❌ ' if notification.is_error else '✅ '
        return await channel.send('```' + prefix + notification.message + '```')

    async def _delete_notification(self, task):
        try:
            msg = await task
            await msg.delete()
        except discord.HTTPException as err:
            logger.warning('Could not remove notification: %s', err)

    @property
    def actions(self):
        return self.bot.actions

    @commands.command(name='create', help='$create <acno> <S|C> <deposit> <name> open a new account')
    async def create(self, ctx, account_no: str, account_type: str, deposit: str, *, name: str):
        self._channel = ctx.channel
        self.actions.create_account(account_no, name, account_type, deposit)

    @commands.command(name='deposit', help='$deposit <acno> <amount> deposit funds')
    async def deposit(self, ctx, account_no: str, amount: str):
        self._channel = ctx.channel
        self.actions.deposit(account_no, amount)

    @commands.command(name='withdraw', help='$withdraw <acno> <amount> withdraw funds')
    async def withdraw(self, ctx, account_no: str, amount: str):
        self._channel = ctx.channel
        self.actions.withdraw(account_no, amount)

    @commands.command(name='balance', help='$balance <acno> balance enquiry')
    async def balance(self, ctx, account_no: str):
        self._channel = ctx.channel
        account = self.actions.enquire(account_no)
        if account is not None:
            await ctx.send('```' + render_account(account, self.bot.settings.currency_symbol) + '```')

    @commands.command(name='accounts', help='$accounts list all accounts')
    async def accounts(self, ctx):
        content = render_accounts(self.actions.list_all(), self.bot.settings.currency_symbol)
        await ctx.send('```' + content + '```')

    @commands.command(name='dashboard', help='$dashboard account count and total balance')
    async def dashboard(self, ctx):
        summary = self.actions.dashboard()
        embed = discord.Embed(title='Dashboard', description='Welcome back, Admin!')
        embed.add_field(name='Total Accounts', value=str(summary.count), inline=True)
        embed.add_field(
            name='Total Balance',
            value=format_money(summary.total_balance, self.bot.settings.currency_symbol),
            inline=True,
        )
        await ctx.send(embed=embed)

    @commands.command(name='modify', help='$modify <acno> <S|C> <balance> <name> update an account, admin only')
    @commands.check(check_admin_role)
    async def modify(self, ctx, account_no: str, account_type: str, balance: str, *, name: str):
        self._channel = ctx.channel
        self.actions.modify_account(account_no, name, account_type, balance)

    @commands.command(name='close', help='$close <acno> permanently remove an account, admin only')
    @commands.check(check_admin_role)
    async def close(self, ctx, account_no: str):
        self._channel = ctx.channel
        msg = await ctx.send(
            '```Are you sure you want to delete account #{}? This action is permanent.```'.format(account_no)
        )
        await msg.add_reaction('✅')
        await msg.add_reaction('❌')

        def check(reaction, user):
            return user == ctx.author and reaction.message.id == msg.id

        while True:
            try:
                reaction, user = await self.bot.wait_for('reaction_add', timeout=600.0, check=check)
            except asyncio.TimeoutError:
                await ctx.send('```Time out```')
                return
            else:
                if reaction.emoji == '✅':
                    self.actions.close_account(account_no)
                    return
                elif reaction.emoji == '❌':
                    await ctx.send('```Cancelled```')
                    return

    @modify.error
    @close.error
    async def admin_error(self, ctx, error):
        if isinstance(error, commands.CheckFailure):
            await ctx.send('```Only administrators can do that.```')
        else:
            raise error


async def setup(bot):
    await bot.add_cog(LedgerCommands(bot))
    logger.info('ledgercmd loaded')
