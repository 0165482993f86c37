"""Chat replies.

Rendering only: every function here is pure and takes use case responses.
"""

from punchline.application.usecase.joke import JokeResponse
from punchline.application.usecase.user import GetLeaderboardResponse, GetUserRankResponse
from punchline.application.usecase.vote import CastVoteResponse
from punchline.domain.value import RankTransition

from .commands import COMMANDS

ALREADY_VOTED = "You have already ranked this joke."
CANNOT_RANK = "Can't rank this message."
TRY_AGAIN_LATER = "Something went wrong while saving that. Please try again later."
NO_JOKES = "No jokes stored yet."
NO_RANKED_JOKES = "No jokes have been ranked yet."
NO_RANKED_USERS = "No users have been ranked yet."
NO_POINTS = "You don't have any points yet."


def invalid_points(points_limit: int) -> str:
    """Reply for a rankjoke command with unusable points."""
    return f"Points must be between -{points_limit} and {points_limit}, and not 0."


def rank_change_notice(response: CastVoteResponse) -> str | None:
    """Promotion or demotion notice for the joke's author, if the vote moved them."""
    if response.transition == RankTransition.PROMOTED:
        return (
            f"🎉 Congratulations <@{response.user_id}>, "
            f"you've been promoted to {response.user_rank.value}!"
        )
    if response.transition == RankTransition.DEMOTED:
        return (
            f"😢 Uh oh, <@{response.user_id}>, "
            f"you've been demoted to {response.user_rank.value}. Keep trying!"
        )
    return None


def vote_confirmation(response: CastVoteResponse, author_name: str) -> str:
    """Score confirmation for an accepted vote."""
    return (
        f"Added {response.points} point(s) to {author_name}'s joke. "
        f"They now have {response.user_score} total point(s) "
        f"and are {response.user_rank.value}."
    )


def accepted_vote_messages(response: CastVoteResponse, author_name: str) -> list[str]:
    """Channel messages for an accepted vote, rank notice first."""
    messages = []
    notice = rank_change_notice(response)
    if notice:
        messages.append(notice)
    messages.append(vote_confirmation(response, author_name))
    return messages


def leaderboard(response: GetLeaderboardResponse) -> str:
    if not response.entries:
        return NO_RANKED_USERS
    lines = [
        f"{entry.position}. {entry.display_name} — {entry.score} pts ({entry.rank.value})"
        for entry in response.entries
    ]
    return "🏆 **Leaderboard** 🏆\n" + "\n".join(lines)


def random_joke(joke: JokeResponse | None) -> str:
    return joke.content if joke else NO_JOKES


def best_joke(joke: JokeResponse | None) -> str:
    if not joke:
        return NO_RANKED_JOKES
    return f'😂 Best joke: "{joke.content}" by {joke.author_name} — {joke.score} pt(s).'


def my_rank(display_name: str, user_rank: GetUserRankResponse | None) -> str:
    if not user_rank:
        return NO_POINTS
    return (
        f"{display_name}, you have {user_rank.score} point(s) "
        f"and your rank is {user_rank.rank.value}."
    )


def command_list(prefix: str = "!") -> str:
    lines = [
        f"**{prefix}{name.value}{' ' + usage if usage else ''}**: {description}"
        for name, usage, description in COMMANDS
    ]
    return "Available commands:\n" + "\n".join(lines)
