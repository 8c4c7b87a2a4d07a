import logging
from typing import Optional

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel

from directives.document_cache import compose_cached
from directives.entities import Configuration
from directives.section_registry import SECTIONS
from directives.settings import load_default_configuration, merge_configuration

logger = logging.getLogger("directive_composer")

app = FastAPI()

# CORS configuration
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # Allow all origins for dev
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

DEFAULT_CONFIGURATION = load_default_configuration()


class DirectiveResponse(BaseModel):
    document: str
    sections: list[str]
    downstream_placeholders: list[str]


class SectionInfo(BaseModel):
    name: str
    required: bool
    slots: list[str]


@app.post("/directives", response_model=DirectiveResponse)
async def compose_directives(config: Optional[Configuration] = None):
    try:
        merged = merge_configuration(DEFAULT_CONFIGURATION, config or Configuration())
        doc = compose_cached(merged)
        return DirectiveResponse(
            document=doc.text,
            sections=list(doc.section_names),
            downstream_placeholders=list(doc.downstream_placeholders),
        )
    except Exception as e:
        logger.exception("compose_directives failed")
        raise HTTPException(status_code=500, detail=str(e))


@app.get("/directives/sections", response_model=list[SectionInfo])
async def list_sections():
    return [
        SectionInfo(name=s.name, required=s.required, slots=list(s.slots))
        for s in SECTIONS
    ]


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
