"""Discord gateway client.

Turns gateway events into use case calls and renders the results back into
the channel. Each event gets its own request-scoped container.
"""

import discord
import logfire
from dishka import AsyncContainer

from punchline.application.usecase.joke import GetBestJokeUseCase, GetRandomJokeUseCase
from punchline.application.usecase.user import (
    GetLeaderboardRequest,
    GetLeaderboardUseCase,
    GetUserRankRequest,
    GetUserRankUseCase,
)
from punchline.application.usecase.vote import (
    CastVoteResponse,
    RankJokeRequest,
    RankJokeUseCase,
    ReactToJokeRequest,
    ReactToJokeUseCase,
)
from punchline.config import DiscordSettings
from punchline.domain.error import (
    InvalidPointsError,
    NotAllowedError,
    StoreUnavailableError,
)
from punchline.domain.service import VotePolicy
from punchline.interface.error import CommandError

from . import messages
from .commands import Command, CommandName, parse_command


def create_intents() -> discord.Intents:
    """Gateway intents: guild messages with content, and reactions."""
    intents = discord.Intents.default()
    intents.message_content = True
    intents.guild_reactions = True
    return intents


class PunchlineBot(discord.Client):
    """Discord client that scores jokes from reply commands and reactions."""

    def __init__(self, container: AsyncContainer, discord_settings: DiscordSettings) -> None:
        """Initialize the bot.

        Args:
            container: Application DI container, closed with the client
            discord_settings: Gateway settings
        """
        super().__init__(intents=create_intents())
        self.container = container
        self.discord_settings = discord_settings

    async def close(self) -> None:
        await super().close()
        await self.container.close()

    async def on_ready(self) -> None:
        logfire.info("Discord bot ready", bot_user=str(self.user))

    async def on_message(self, message: discord.Message) -> None:
        """Handle text commands."""
        if message.author.bot:
            return

        try:
            command = parse_command(message.content, self.discord_settings.command_prefix)
        except CommandError as e:
            # Malformed rankjoke; only answer when it is actually a reply
            if message.reference is not None:
                await message.reply(str(e))
            return

        if command is None:
            return

        with logfire.span(
            "discord command {command}",
            command=command.name.value,
            user_id=str(message.author.id),
        ):
            try:
                await self._dispatch(command, message)
            except StoreUnavailableError:
                await message.reply(messages.TRY_AGAIN_LATER)
            except Exception:
                logfire.exception("Discord command failed", command=command.name.value)
                await message.reply(messages.TRY_AGAIN_LATER)
                raise

    async def on_raw_reaction_add(self, payload: discord.RawReactionActionEvent) -> None:
        """Handle reaction votes.

        Raw events are used so reactions on messages outside the client's
        cache still count. Rejections and repeat votes are silent; failures
        get a retry-later mention in the joke's channel.
        """
        if self.user is not None and payload.user_id == self.user.id:
            return
        if payload.member is not None and payload.member.bot:
            return

        emoji = payload.emoji.name
        if not emoji:
            return

        # Skip the message fetch for emoji that are worth nothing
        vote_policy = await self.container.get(VotePolicy)
        if vote_policy.reaction_points(emoji) is None:
            return

        with logfire.span(
            "discord reaction {emoji}",
            emoji=emoji,
            joke_id=str(payload.message_id),
            user_id=str(payload.user_id),
        ):
            joke_message = await self._fetch_message(payload.channel_id, payload.message_id)
            if joke_message is None:
                return

            try:
                async with self.container() as request_container:
                    use_case = await request_container.get(ReactToJokeUseCase)
                    response = await use_case.execute(
                        ReactToJokeRequest(
                            joke_id=str(joke_message.id),
                            author_id=str(joke_message.author.id),
                            author_name=joke_message.author.name,
                            author_is_bot=joke_message.author.bot,
                            content=joke_message.content,
                            voter_id=str(payload.user_id),
                            emoji=emoji,
                        )
                    )
            except NotAllowedError:
                return
            except StoreUnavailableError:
                logfire.warn("Reaction vote dropped: store unavailable")
                await joke_message.channel.send(
                    f"<@{payload.user_id}> {messages.TRY_AGAIN_LATER}"
                )
                return
            except Exception:
                logfire.exception("Reaction vote failed")
                await joke_message.channel.send(
                    f"<@{payload.user_id}> {messages.TRY_AGAIN_LATER}"
                )
                raise

            if response is not None and response.accepted:
                await self._announce(joke_message.channel, response, joke_message.author.name)

    async def _dispatch(self, command: Command, message: discord.Message) -> None:
        if command.name == CommandName.RANK_JOKE:
            await self._rank_joke(command, message)
            return

        if command.name == CommandName.COMMANDS:
            await message.reply(messages.command_list(self.discord_settings.command_prefix))
            return

        async with self.container() as request_container:
            if command.name == CommandName.LEADERBOARD:
                use_case = await request_container.get(GetLeaderboardUseCase)
                reply = messages.leaderboard(await use_case.execute(GetLeaderboardRequest()))
            elif command.name == CommandName.RANDOM_JOKE:
                use_case = await request_container.get(GetRandomJokeUseCase)
                reply = messages.random_joke(await use_case.execute())
            elif command.name == CommandName.BEST_JOKE:
                use_case = await request_container.get(GetBestJokeUseCase)
                reply = messages.best_joke(await use_case.execute())
            else:
                use_case = await request_container.get(GetUserRankUseCase)
                user_rank = await use_case.execute(
                    GetUserRankRequest(user_id=str(message.author.id))
                )
                reply = messages.my_rank(message.author.name, user_rank)

        await message.reply(reply)

    async def _rank_joke(self, command: Command, message: discord.Message) -> None:
        # rankjoke only works as a reply to the joke
        if message.reference is None or message.reference.message_id is None:
            return

        joke_message = message.reference.resolved
        if not isinstance(joke_message, discord.Message):
            joke_message = await self._fetch_message(
                message.channel.id, message.reference.message_id
            )
        if joke_message is None:
            await message.reply(messages.CANNOT_RANK)
            return

        async with self.container() as request_container:
            use_case = await request_container.get(RankJokeUseCase)
            try:
                response = await use_case.execute(
                    RankJokeRequest(
                        joke_id=str(joke_message.id),
                        author_id=str(joke_message.author.id),
                        author_name=joke_message.author.name,
                        author_is_bot=joke_message.author.bot,
                        content=joke_message.content,
                        voter_id=str(message.author.id),
                        points=command.points,
                    )
                )
            except InvalidPointsError:
                vote_policy = await request_container.get(VotePolicy)
                await message.reply(messages.invalid_points(vote_policy.points_limit))
                return
            except NotAllowedError:
                await message.reply(messages.CANNOT_RANK)
                return

        if not response.accepted:
            await message.reply(messages.ALREADY_VOTED)
            return

        await self._announce(message.channel, response, joke_message.author.name)

    async def _announce(
        self,
        channel: discord.abc.Messageable,
        response: CastVoteResponse,
        author_name: str,
    ) -> None:
        for text in messages.accepted_vote_messages(response, author_name):
            await channel.send(text)

    async def _fetch_message(self, channel_id: int, message_id: int) -> discord.Message | None:
        channel = self.get_channel(channel_id)
        try:
            if channel is None:
                channel = await self.fetch_channel(channel_id)
            return await channel.fetch_message(message_id)
        except discord.HTTPException as e:
            logfire.warn(
                "Could not fetch message",
                channel_id=channel_id,
                message_id=message_id,
                error=str(e),
            )
            return None
