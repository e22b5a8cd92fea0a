"""CLI 엔트리포인트."""

import asyncio
import logging
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.progress import Progress, SpinnerColumn, TextColumn
from rich.table import Table

from repolens.config import settings
from repolens.models import PrimaryLanguageStrategy
from repolens.pipeline import ReportResult, generate_report
from repolens.reports.markdown import primary_language
from repolens.sources import GitHubClient
from repolens.tagging import TaggingEngine

console = Console()

app = typer.Typer(
    name="repolens",
    help="GitHub 사용자의 저장소를 분석하여 Markdown 리포트를 생성합니다.",
    no_args_is_help=True,
)


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.INFO if verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def _render_summary(result: ReportResult, strategy: PrimaryLanguageStrategy) -> None:
    """스타 상위 저장소를 Rich 테이블로 출력한다."""
    if not result.repositories:
        console.print("[yellow]수집된 저장소가 없습니다.[/yellow]")
        return

    table = Table(show_header=True, header_style="bold cyan")
    table.add_column("#", style="dim", width=3)
    table.add_column("저장소", style="bold")
    table.add_column("⭐ Stars", justify="right")
    table.add_column("언어", width=12)
    table.add_column("태그")

    ranked = sorted(
        result.repositories, key=lambda repo: repo.stargazers_count, reverse=True
    )
    for i, repo in enumerate(ranked[:10], 1):
        analysis = result.analyses.get(repo.name)
        tags = [*analysis.frameworks, *analysis.tools] if analysis else []
        language = primary_language(repo, result.languages.get(repo.name), strategy)
        table.add_row(
            str(i),
            f"[link={repo.html_url}]{repo.name}[/link]",
            f"{repo.stargazers_count:,}",
            language or "-",
            ", ".join(tags) or "-",
        )

    console.print(table)


async def _run(
    user: str,
    token: str,
    output: Path,
    strategy: PrimaryLanguageStrategy,
) -> ReportResult:
    """메인 파이프라인을 실행한다."""
    engine = TaggingEngine()

    with Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        console=console,
        transient=True,
    ) as progress:
        task = progress.add_task("준비 중...", total=None)

        def _on_progress(message: str) -> None:
            progress.update(task, description=message)

        async with GitHubClient(
            token=token,
            base_url=settings.github_api_base,
            timeout=settings.request_timeout,
        ) as client:
            result = await generate_report(
                user,
                client,
                engine,
                strategy=strategy,
                on_progress=_on_progress,
            )
        progress.remove_task(task)

    output.write_text(result.markdown, encoding="utf-8")
    return result


@app.command()
def main(
    user: Annotated[
        str,
        typer.Option("--user", "-u", help="GitHub 사용자 또는 조직 이름"),
    ],
    token: Annotated[
        str | None,
        typer.Option(
            "--token",
            "-t",
            help="GitHub 개인 액세스 토큰 (없으면 GITHUB_TOKEN 환경변수 사용)",
        ),
    ] = None,
    output: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="리포트 출력 경로"),
    ] = None,
    primary_language_strategy: Annotated[
        PrimaryLanguageStrategy | None,
        typer.Option(
            "--primary-language",
            help="주 언어 선택 방식 (first: 첫 번째 언어, max-bytes: 최대 바이트)",
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="상세 로그 출력"),
    ] = False,
) -> None:
    """GitHub 사용자의 저장소를 분석하여 Markdown 리포트를 생성합니다."""
    _configure_logging(verbose)

    token = token or settings.github_token
    if not token:
        console.print(
            "[red]오류: GitHub 토큰이 필요합니다. "
            "--token 옵션 또는 GITHUB_TOKEN 환경변수로 지정하세요.[/red]"
        )
        raise typer.Exit(1)

    output = output or Path(settings.output_path)
    strategy = primary_language_strategy or settings.primary_language_strategy

    try:
        result = asyncio.run(_run(user, token, output, strategy))
    except KeyboardInterrupt:
        console.print("\n[dim]중단됨[/dim]")
        raise typer.Exit(0) from None
    except Exception as e:
        console.print(f"[red]오류 발생: {e}[/red]")
        raise typer.Exit(1) from e

    console.print(
        f"[green]✓[/green] {len(result.repositories)}개 저장소 분석 완료"
    )
    _render_summary(result, strategy)
    console.print(f"[green]리포트 저장: {output}[/green]")


if __name__ == "__main__":
    app()
