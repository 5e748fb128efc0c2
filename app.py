from dotenv import load_dotenv

# before the app modules import, so LOG_LEVEL and GEMINI_* from .env are visible to them
load_dotenv()

from fastapi import FastAPI  # noqa: E402
from fastapi.middleware.cors import CORSMiddleware  # noqa: E402
import uvicorn  # noqa: E402

from routers import agent_router  # noqa: E402

app = FastAPI(title="StorePilot Agent")

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


app.include_router(agent_router.router, prefix="/api/agent", tags=["Agent"])


@app.get("/")
async def root():
    return {"message": "StorePilot agent is running"}


if __name__ == "__main__":
    uvicorn.run("app:app", host="0.0.0.0", port=8000, reload=True)
