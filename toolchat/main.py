from fastapi import FastAPI

from .api import router

app = FastAPI(title="toolchat")
app.include_router(router)


@app.get("/health")
async def health():
    return {"ok": True}
