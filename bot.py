"""Discord side of the relay: the `/bot` slash command and reply delivery."""

import logging

import discord
from discord import app_commands

from models.schemas import ChatMessage, ColorTag
from services.command_handler import CommandHandler

logger = logging.getLogger(__name__)

COMMAND_NAME = "bot"
COMMAND_DESCRIPTION = "Forward a query to the target service"
QUERY_DESCRIPTION = "The query to forward"

EMBED_COLORS = {
    ColorTag.SUCCESS: discord.Color.green(),
    ColorTag.INFO: discord.Color.blue(),
}


def to_embeds(message: ChatMessage) -> list[discord.Embed]:
    """Convert rendered attachments into Discord embeds, preserving order."""
    return [
        discord.Embed(title=a.title, description=a.body, color=EMBED_COLORS[a.color])
        for a in message.attachments
    ]


class RelayBot(discord.Client):
    """Discord client exposing a single global `/bot` command."""

    def __init__(self, handler: CommandHandler, intents: discord.Intents | None = None):
        super().__init__(intents=intents or discord.Intents.default())
        self.handler = handler
        self.tree = app_commands.CommandTree(self)
        self._commands_synced = False

        @self.tree.command(name=COMMAND_NAME, description=COMMAND_DESCRIPTION)
        @app_commands.describe(query=QUERY_DESCRIPTION)
        async def bot_command(interaction: discord.Interaction, query: str):
            await self.handle_command(interaction, query)

    async def on_ready(self):
        logger.info("%s is connected!", self.user)
        if self._commands_synced:
            return
        self._commands_synced = True
        await self.register_commands()

    async def register_commands(self):
        try:
            synced = await self.tree.sync()
            logger.info("Registered %d global command(s)", len(synced))
        except discord.HTTPException as e:
            logger.error("Error creating command: %s", e)

    async def handle_command(self, interaction: discord.Interaction, query: str | None):
        logger.info("Received command: %s", COMMAND_NAME)
        # Acknowledge within Discord's 3s deadline; the backend may be slower
        try:
            await interaction.response.defer(thinking=True)
        except discord.DiscordException as e:
            logger.error("Error acknowledging slash command: %s", e)
            return

        message = await self.handler.respond(query)
        try:
            await interaction.followup.send(
                content=message.text,
                embeds=to_embeds(message),
            )
        except discord.DiscordException as e:
            logger.error("Error responding to slash command: %s", e)
