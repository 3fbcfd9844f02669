from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from ddl_json.config import CORS_ORIGINS
from ddl_json.routers import ddl_router


app = FastAPI(title="ddl2json API")

# CORS 설정
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(ddl_router)


@app.get("/health")
async def health():
    return {"status": "ok"}
