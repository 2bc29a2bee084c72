# otui_preview/otui_preview_daemon.py
import datetime
import logging

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import HTMLResponse, JSONResponse
from pydantic import BaseModel

from .config import load_config
from .otui_parser import parse_otui, prettify_otui, validate_otui
from .preview import INITIAL_OTUI, render_otui
from .surfaces import HTMLPreviewSurface

# === CONFIGURATION ===
config = load_config()

# === LOGGING ===
logger = logging.getLogger("otui_preview_daemon")

# === APP INITIALIZATION ===
app = FastAPI(title="OTUI Preview Daemon", version="1.0.0")

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Last rendered preview, served by /preview
preview_surface = HTMLPreviewSurface()
render_otui(INITIAL_OTUI, preview_surface)


# === MODELS ===
class OTUIRequest(BaseModel):
    otui: str


# === ROUTES ===
@app.post("/render")
def render(req: OTUIRequest):
    global preview_surface
    logger.info("[RENDER] Rendering OTUI packet (%d chars)", len(req.otui))

    try:
        surface = HTMLPreviewSurface()
        result = render_otui(req.otui, surface)
        preview_surface = surface
        return JSONResponse(content={
            "status": result.status,
            "root_kind": result.root_kind,
            "message": result.message,
            "html": surface.render(),
            "tree": result.tree,
            "widgets": result.node.to_dict(),
            "timestamp": str(datetime.datetime.now()),
        })
    except Exception as e:
        logger.exception("Error during OTUI rendering")
        return JSONResponse(content={
            "status": "error",
            "message": str(e)
        }, status_code=500)


@app.get("/preview", response_class=HTMLResponse)
def preview():
    return HTMLResponse(content=preview_surface.render_page(title=config.page_title))


@app.post("/format")
def format_otui(req: OTUIRequest):
    return {"formatted": prettify_otui(req.otui), "valid": validate_otui(req.otui)}


@app.get("/debug/otui_parse")
def debug_otui_parser(otui: str):
    parsed = parse_otui(otui)
    return {"parsed": parsed, "top_level_keys": list(parsed.keys())}


@app.get("/")
def root():
    return {
        "message": "OTUI Preview Daemon active",
        "preview": preview_surface.get_status(),
        "config": {"host": config.host, "port": config.port, "page_title": config.page_title},
    }


def run(config_file_path=None):
    global config
    if config_file_path:
        config = load_config(config_file_path)
    logging.basicConfig(level=config.log_level.upper())
    logger.info("[BOOT] OTUI Preview Daemon starting on %s:%s", config.host, config.port)
    uvicorn.run(
        "otui_preview.otui_preview_daemon:app",
        host=config.host,
        port=config.port,
        reload=config.reload,
        log_level=config.log_level.lower(),
    )


if __name__ == "__main__":
    run()
