# src/pr_checks/main.py
import hashlib
import hmac
import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI, Header, HTTPException, BackgroundTasks, Request
from pydantic import BaseModel, ValidationError

from pr_checks.checks.pr_body import validate_pr_body
from pr_checks.comments.reconciler import CommentReconciler
from pr_checks.config import Settings, get_settings
from pr_checks.models.comment import RepoRef
from pr_checks.models.validation import ValidationResult
from pr_checks.models.webhook import GitHubPullRequestEvent
from pr_checks.platforms.github import GitHubClient


logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

PR_ACTIONS = ("opened", "edited", "reopened", "synchronize")


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("PR checks service starting...")
    yield
    logger.info("PR checks service shutting down...")


app = FastAPI(title="PR Checks", lifespan=lifespan)


class WebhookResponse(BaseModel):
    status: str
    message: str | None = None


class ValidateRequest(BaseModel):
    body: str | None = None


def verify_signature(secret: str, payload: bytes, signature: str | None) -> bool:
    """Check a GitHub X-Hub-Signature-256 header against the raw payload."""
    if not signature or not signature.startswith("sha256="):
        return False
    expected = hmac.new(secret.encode(), payload, hashlib.sha256).hexdigest()
    return hmac.compare_digest(f"sha256={expected}", signature)


def get_reconciler(settings: Settings) -> CommentReconciler:
    github = GitHubClient(token=settings.github_token or "", base_url=settings.github_api_url)
    return CommentReconciler(
        host=github,
        marker=settings.comment_marker,
        heading=settings.comment_heading,
    )


@app.get("/health")
async def health():
    return {"status": "ok", "version": "0.1.0"}


@app.post("/webhook/github", response_model=WebhookResponse)
async def github_webhook(
    request: Request,
    background_tasks: BackgroundTasks,
    x_github_event: str = Header(...),
    x_hub_signature_256: str | None = Header(None),
):
    settings = get_settings()
    payload = await request.body()

    # Verify webhook signature
    secret = settings.github_webhook_secret
    if not secret or not verify_signature(secret, payload, x_hub_signature_256):
        raise HTTPException(status_code=401, detail="Invalid webhook signature")

    if x_github_event == "pull_request":
        try:
            event = GitHubPullRequestEvent.model_validate_json(payload)
        except ValidationError as e:
            raise HTTPException(status_code=400, detail=f"Invalid pull_request payload: {e.error_count()} errors")

        if event.action in PR_ACTIONS:
            background_tasks.add_task(
                process_pull_request,
                repo=RepoRef(owner=event.repository.owner.login, repo=event.repository.name),
                pr_number=event.pull_request.number,
                pr_body=event.pull_request.body,
            )
            return WebhookResponse(status="accepted", message="Checks scheduled")

    return WebhookResponse(status="ignored", message="Event not relevant")


@app.post("/api/validate", response_model=ValidationResult)
async def validate_body(request: ValidateRequest):
    """Validate a pull request description without touching GitHub."""
    return validate_pr_body(request.body)


async def process_pull_request(repo: RepoRef, pr_number: int, pr_body: str | None):
    """Background task: validate the description and sync the bot comment."""
    settings = get_settings()
    result = validate_pr_body(pr_body)
    logger.info(f"PR #{pr_number} in {repo}: {result.result.value}")

    try:
        action = await get_reconciler(settings).reconcile(repo, pr_number, [result.message])
        logger.info(f"Comment {action.value} for PR #{pr_number}")
    except Exception as e:
        logger.exception(f"Comment sync failed for PR #{pr_number}: {e}")
