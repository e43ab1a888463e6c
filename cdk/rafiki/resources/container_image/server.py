import logging

from fastapi import FastAPI, WebSocket, WebSocketDisconnect

logger = logging.getLogger("uvicorn.error")

app = FastAPI(title="websocket-service")


@app.get("/")
def root():
    return {"service": "websocket-service"}


@app.get("/health")
def health():
    return {"status": "ok"}


@app.websocket("/ws")
async def echo(websocket: WebSocket):
    await websocket.accept()
    try:
        while True:
            message = await websocket.receive_text()
            await websocket.send_text(message)
    except WebSocketDisconnect:
        logger.info("websocket client disconnected")
