"""CLI interface using typer + rich."""

from __future__ import annotations

import asyncio
import logging
import subprocess
import sys
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

import pydantic
import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.panel import Panel
from rich.progress import Progress, SpinnerColumn, TextColumn

from interview_prep.clients.llm_client import GeminiClient
from interview_prep.config import get_api_key, load_config
from interview_prep.errors import InterviewPrepError
from interview_prep.export.text_export import export_filename, render_text
from interview_prep.models.request import InterviewType, RoleLevel
from interview_prep.models.result import GenerationResult
from interview_prep.pipeline.qa_generator import QAGenerator
from interview_prep.validation import validate_request

app = typer.Typer(
    name="interview-prep",
    help="Tailored interview Q&A from a job description and a resume",
    no_args_is_help=True,
)
console = Console()

STREAMLIT_APP = Path(__file__).resolve().parent.parent.parent / "streamlit_app.py"


def _setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
    )


@app.command()
def serve(
    host: str = typer.Option(None, "--host", help="Bind address (default from config)"),
    port: int = typer.Option(None, "--port", "-p", help="Port (default from config)"),
    reload: bool = typer.Option(False, "--reload", help="Auto-reload on code changes"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging"),
) -> None:
    """Run the generate-qa HTTP API."""
    import uvicorn

    _setup_logging(verbose)
    config = load_config()
    uvicorn.run(
        "interview_prep.api:create_app",
        factory=True,
        host=host or config.server.host,
        port=port or config.server.port,
        reload=reload,
    )


@app.command()
def generate(
    jd: Path = typer.Option(..., "--jd", help="Job description text file"),
    resume: Path = typer.Option(..., "--resume", help="Resume text file"),
    level: RoleLevel = typer.Option(RoleLevel.MID, "--level", "-l", help="Target role level"),
    interview_type: InterviewType = typer.Option(
        InterviewType.MIXED, "--type", "-t", help="Interview type"
    ),
    num: int = typer.Option(15, "--num", "-n", help="Number of questions (10, 15 or 20)"),
    output: Path = typer.Option(None, "--output", "-o", help="Output .txt path"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging"),
) -> None:
    """Generate an interview plan locally and save it as a .txt file."""
    _setup_logging(verbose)
    for path in (jd, resume):
        if not path.exists():
            console.print(f"[red]File not found: {path}[/red]")
            raise typer.Exit(1)

    config = load_config()
    payload = {
        "jobDescription": jd.read_text(encoding="utf-8"),
        "resume": resume.read_text(encoding="utf-8"),
        "targetRoleLevel": level.value,
        "interviewType": interview_type.value,
        "numQuestions": num,
    }

    try:
        request = validate_request(payload)
        llm = GeminiClient(
            api_key=get_api_key(),
            model=config.llm.model,
            timeout=config.llm.timeout,
        )
        with Progress(
            SpinnerColumn(),
            TextColumn("[progress.description]{task.description}"),
            console=console,
        ) as progress:
            progress.add_task("Generating interview plan...", total=None)
            data = asyncio.run(QAGenerator(llm).generate(request))
        result = GenerationResult.model_validate(data)
    except InterviewPrepError as e:
        console.print(f"[red]{e.message}[/red]")
        raise typer.Exit(1)
    except pydantic.ValidationError as e:
        console.print(f"[red]Unusable interview plan from AI model: {escape(str(e))}[/red]")
        raise typer.Exit(1)

    if output is None:
        output = Path("./output") / export_filename()
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(render_text(result), encoding="utf-8")

    usage = llm.get_token_summary()
    console.print(
        Panel(
            f"Sections: {len(result.sections)} | Questions: {result.total_questions}/{request.num_questions}"
            f"\nTokens: {usage['input']} in / {usage['output']} out",
            title="Interview Plan",
        )
    )
    if result.total_questions != request.num_questions:
        console.print(
            f"[yellow]Model returned {result.total_questions} questions, "
            f"{request.num_questions} requested[/yellow]"
        )
    console.print(f"\n[green]Saved: {output}[/green]")


@app.command()
def ui(
    port: int = typer.Option(8501, "--port", "-p", help="Streamlit port"),
) -> None:
    """Launch the Streamlit web UI (the API must be running)."""
    if not STREAMLIT_APP.exists():
        console.print(f"[red]Streamlit app not found: {STREAMLIT_APP}[/red]")
        raise typer.Exit(1)
    cmd = [
        sys.executable, "-m", "streamlit", "run", str(STREAMLIT_APP),
        "--server.port", str(port),
    ]
    raise typer.Exit(subprocess.call(cmd))


if __name__ == "__main__":
    app()
