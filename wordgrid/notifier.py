import logging
from collections import defaultdict

import httpx

logger = logging.getLogger("wordgrid")


def format_summary(words: list[str], grid: list[list[str]], words_per_group: int = 10) -> tuple[str, str]:
    """Build (title, body) for a solve result: a few words per length, then counts."""
    by_length: dict[int, list[str]] = defaultdict(list)
    for w in words:
        by_length[len(w)].append(w)

    size = len(grid)
    title = f"Word grid {size}x{size} - {len(words)} words"

    selected = []
    for length in sorted(by_length):
        selected.extend(by_length[length][:words_per_group])

    board = " / ".join("".join(row) for row in grid)
    counts = " | ".join(f"{l}L:{len(g)}" for l, g in sorted(by_length.items()))
    body = board + "\n\n" + ",".join(selected) + "\n\n" + counts
    return title, body


async def send_notification(
    words: list[str],
    grid: list[list[str]],
    topic: str,
    ntfy_url: str = "https://ntfy.sh",
    words_per_group: int = 10,
    transport: httpx.AsyncBaseTransport | None = None,
):
    """Send solve results to ntfy. Best effort: failures are logged, not raised."""
    try:
        title, body = format_summary(words, grid, words_per_group)

        async with httpx.AsyncClient(timeout=10.0, transport=transport) as client:
            resp = await client.post(
                f"{ntfy_url}/{topic}",
                content=body.encode("utf-8"),
                headers={
                    "Title": title,
                    "Tags": "abc",
                },
            )
            resp.raise_for_status()
            logger.info("Notification sent to %s/%s (status %d)", ntfy_url, topic, resp.status_code)

    except httpx.HTTPError as e:
        logger.error("Failed to send notification: %s", e)
