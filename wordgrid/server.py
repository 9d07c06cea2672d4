import logging
from contextlib import asynccontextmanager

from fastapi import BackgroundTasks, FastAPI, HTTPException, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from wordgrid.settings import settings

logging.basicConfig(level=logging.INFO, format="%(asctime)s %(name)s %(levelname)s %(message)s")
logger = logging.getLogger("wordgrid")


class SolveRequest(BaseModel):
    # Each row is a string ("cats") or a list of single letters.
    grid: list[str | list[str]]


def _rows(grid: list[str | list[str]]) -> list[list[str]]:
    return [[ch.lower() for ch in row] for row in grid]


def create_app(trie=None) -> FastAPI:
    """Build the service. Pass ``trie`` to skip loading the dictionary file."""

    @asynccontextmanager
    async def lifespan(application: FastAPI):
        if trie is not None:
            application.state.trie = trie
        else:
            from wordgrid.dictionary import load_trie
            logger.info("Loading dictionary from %s", settings.DICTIONARY_PATH)
            application.state.trie = load_trie(settings.DICTIONARY_PATH)
        logger.info("Trie loaded (%d words)", len(application.state.trie))
        yield

    application = FastAPI(title="Word Grid Solver", lifespan=lifespan)

    @application.get("/health")
    async def health(request: Request):
        loaded = getattr(request.app.state, "trie", None)
        return {
            "status": "ok",
            "trie_loaded": loaded is not None,
            "word_count": len(loaded) if loaded is not None else 0,
        }

    @application.post("/solve")
    async def solve(body: SolveRequest, request: Request, background_tasks: BackgroundTasks):
        from wordgrid.metrics import SearchStats, StageTimer
        from wordgrid.notifier import send_notification
        from wordgrid.solver import GridShapeError, solve as solve_grid, solve_parallel

        timer = StageTimer()
        grid = _rows(body.grid)
        trie = request.app.state.trie
        stats = SearchStats()

        board_str = " / ".join("".join(row) for row in grid)
        logger.info("POST /solve grid=%s", board_str)

        try:
            with timer.stage("solve"):
                if settings.SEARCH_WORKERS > 1:
                    all_words = solve_parallel(
                        grid, trie, settings.GRID_SIZE, settings.SEARCH_WORKERS,
                        settings.MIN_WORD_LENGTH, stats,
                    )
                else:
                    all_words = solve_grid(grid, trie, settings.GRID_SIZE, settings.MIN_WORD_LENGTH, stats)
        except GridShapeError as e:
            raise HTTPException(400, str(e))

        words = all_words[:settings.MAX_RESULTS] if settings.MAX_RESULTS > 0 else all_words
        logger.info("Found %d words (returning %d), %s", len(all_words), len(words), stats.as_dict())

        if settings.NOTIFY_ENABLED:
            background_tasks.add_task(
                send_notification, all_words, grid, settings.NTFY_TOPIC,
                settings.NTFY_URL, settings.NOTIFY_WORDS_PER_GROUP,
            )

        response = {
            "grid_size": settings.GRID_SIZE,
            "words": words,
            "word_count": len(words),
            "processing_time": timer.total_ms,
            "stage_timings": timer.summary(),
        }
        if settings.DEBUG:
            response["search_stats"] = stats.as_dict()
        return JSONResponse(response)

    @application.get("/api/settings")
    async def api_get_settings():
        from wordgrid.settings import EDITABLE_FIELDS, get_editable_settings
        values = get_editable_settings(settings)
        field_types = {k: v.__name__ for k, v in EDITABLE_FIELDS.items()}
        return JSONResponse({"settings": values, "field_types": field_types})

    @application.post("/api/settings")
    async def api_post_settings(request: Request):
        from wordgrid.settings import get_editable_settings, update_settings
        body = await request.json()
        errors = update_settings(settings, **body)
        if errors:
            return JSONResponse({"updated": get_editable_settings(settings), "errors": errors}, status_code=400)
        logger.info("Settings updated: %s", body)
        return JSONResponse({"updated": get_editable_settings(settings)})

    return application


app = create_app()
