"""
Insight module - turns the structured review export into a written analysis.
Uses the OpenAI Assistants API with file search over the uploaded reviews.json.

Resources created along the way (uploaded file, assistant) are only cleaned up
on success. If a step fails they are left on the OpenAI account.
"""
import time
from pathlib import Path

import openai

import config

PENDING_RUN_STATUSES = {"queued", "in_progress", "cancelling"}

USER_MESSAGE = "Analyze the reviews in the attached file and write the report."


class InsightError(Exception):
    """The analysis run did not produce a report"""


class AnalysisRunError(InsightError):
    """The run ended in a status other than completed"""


class AnalysisTimeoutError(InsightError):
    """The run did not finish within the allowed time and was cancelled"""


def create_client(api_key: str) -> openai.OpenAI:
    return openai.OpenAI(api_key=api_key)


class InsightPipeline:
    """
    Drives one analysis job: upload -> assistant -> thread -> run -> messages -> delete assistant.
    """

    def __init__(
        self,
        client: openai.OpenAI,
        instructions: str = config.ANALYSIS_PROMPT,
        model: str = config.INSIGHT_MODEL,
        assistant_name: str = config.ASSISTANT_NAME,
        poll_interval: float = config.RUN_POLL_INTERVAL,
        timeout: float = config.RUN_TIMEOUT_SECONDS,
    ):
        self.client = client
        self.instructions = instructions
        self.model = model
        self.assistant_name = assistant_name
        self.poll_interval = poll_interval
        self.timeout = timeout

    def upload(self, path: Path) -> str:
        with open(path, "rb") as f:
            uploaded = self.client.files.create(file=f, purpose="assistants")
        print(f"  ✓ Uploaded {Path(path).name} ({uploaded.id})")
        return uploaded.id

    def create_assistant(self) -> str:
        assistant = self.client.beta.assistants.create(
            name=self.assistant_name,
            instructions=self.instructions,
            model=self.model,
            tools=[{"type": "file_search"}],
        )
        print(f"  ✓ Created assistant ({assistant.id})")
        return assistant.id

    def create_thread(self, file_id: str) -> str:
        thread = self.client.beta.threads.create(
            messages=[
                {
                    "role": "user",
                    "content": USER_MESSAGE,
                    "attachments": [
                        {"file_id": file_id, "tools": [{"type": "file_search"}]}
                    ],
                }
            ]
        )
        return thread.id

    def run_to_completion(self, thread_id: str, assistant_id: str) -> str:
        """
        Start a run and poll until it finishes.
        Raises AnalysisTimeoutError (after cancelling the run) or AnalysisRunError.
        """
        runs = self.client.beta.threads.runs
        run = runs.create(thread_id=thread_id, assistant_id=assistant_id)
        deadline = time.monotonic() + self.timeout
        print(f"  Analysis running ({run.id})...")

        while run.status in PENDING_RUN_STATUSES:
            if time.monotonic() >= deadline:
                runs.cancel(run_id=run.id, thread_id=thread_id)
                raise AnalysisTimeoutError(
                    f"Run {run.id} still {run.status} after {self.timeout}s; cancelled"
                )
            time.sleep(self.poll_interval)
            run = runs.retrieve(run_id=run.id, thread_id=thread_id)

        if run.status != "completed":
            detail = getattr(run, "last_error", None)
            message = f"Run {run.id} ended with status {run.status}"
            if detail:
                message += f": {detail}"
            raise AnalysisRunError(message)

        print(f"  ✓ Analysis complete")
        return run.id

    def fetch_report(self, thread_id: str, run_id: str) -> str:
        """Return the text of the last message produced by the run"""
        messages = self.client.beta.threads.messages.list(
            thread_id=thread_id, run_id=run_id, order="asc"
        )
        if not messages.data:
            raise InsightError(f"Run {run_id} produced no messages")

        last = messages.data[-1]
        parts = [block.text.value for block in last.content if block.type == "text"]
        if not parts:
            raise InsightError(f"Last message of run {run_id} has no text")
        return "\n\n".join(parts)

    def summarize(self, structured_export_path) -> str:
        file_id = self.upload(Path(structured_export_path))
        assistant_id = self.create_assistant()
        thread_id = self.create_thread(file_id)
        run_id = self.run_to_completion(thread_id, assistant_id)
        report = self.fetch_report(thread_id, run_id)

        self.client.beta.assistants.delete(assistant_id=assistant_id)
        print(f"  ✓ Deleted assistant ({assistant_id})")
        return report


def write_report(text: str, path) -> Path:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        f.write(text)
    return path
