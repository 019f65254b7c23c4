"""Command-line interface for the translation pipeline."""

import asyncio
import json
import click
from typing import Optional
from rich.console import Console
from rich.table import Table
from rich.panel import Panel

from .config import config
from .logging_config import configure_logging
from .models.translation_result import TranslationResult
from .translation.model_pipeline import ModelPipeline
from .translation.router import TranslationRouter

console = Console()


def _build_router(use_model: bool = False) -> TranslationRouter:
    """Build a router, loading configured data files."""
    configure_logging(config.log_level)
    router = TranslationRouter(config=config)
    if use_model:
        router.model_pipeline = ModelPipeline.from_config(config, router.registry)
    asyncio.run(router.initialize())
    return router


def _check_config() -> None:
    errors = config.validate()
    if errors:
        console.print("[red]Configuration errors:[/red]")
        for error in errors:
            console.print(f"  - {error}")
        raise click.Abort()


@click.group()
@click.version_option(version="0.1.0")
def cli():
    """LingoPivot offline translation CLI."""
    pass


@cli.command()
@click.argument("text")
@click.option("--source", "-s", default="english", help="Source language (name, code or alias)")
@click.option("--target", "-t", required=True, help="Target language (name, code or alias)")
@click.option("--json", "as_json", is_flag=True, help="Print the full result as JSON")
@click.option("--model", "use_model", is_flag=True, help="Use the model backend when confidence is low")
def translate(text: str, source: str, target: str, as_json: bool, use_model: bool):
    """Translate TEXT from one language to another."""
    if use_model:
        _check_config()
        if not config.model_enabled:
            console.print("[red]Error: LINGOPIVOT_MODEL_BACKEND is not set[/red]")
            raise click.Abort()

    router = _build_router(use_model)
    if use_model:
        result = asyncio.run(router.translate_async(text, source, target))
    else:
        result = router.translate(text, source, target)

    if as_json:
        click.echo(json.dumps(result.to_dict(), ensure_ascii=False, indent=2))
        return

    console.print(f"[bold]{result.text}[/bold]")
    _print_result_details(result)


@cli.command()
@click.argument("text")
@click.option("--sender", required=True, help="Sender's language")
@click.option("--receiver", required=True, help="Receiver's language")
def chat(text: str, sender: str, receiver: str):
    """Show how TEXT appears to the sender and to the receiver."""
    router = _build_router()
    views = router.translate_for_chat(text, sender, receiver)

    table = Table(title=f"Chat: {views.sender_language} -> {views.receiver_language}")
    table.add_column("View", style="cyan")
    table.add_column("Text")

    table.add_row("Original", views.original_text)
    table.add_row(f"Sender ({views.sender_language})", views.sender_view)
    table.add_row("English core", views.english_core)
    table.add_row(f"Receiver ({views.receiver_language})", views.receiver_view)
    console.print(table)

    console.print(
        f"[dim]Path:[/dim] {views.path.value}  "
        f"[dim]Method:[/dim] {views.method.value}  "
        f"[dim]Confidence:[/dim] {views.confidence:.2f}"
    )


@cli.command()
@click.argument("text")
@click.option("--language", "-l", required=True, help="Language whose script to use")
@click.option("--reverse", is_flag=True, help="Convert native script back to Latin")
def transliterate(text: str, language: str, reverse: bool):
    """Convert TEXT between Latin keyboard input and a native script."""
    router = _build_router()
    transliterator = router.transliterator

    if not transliterator.has_transliteration(language):
        console.print(f"[yellow]No transliteration available for {router.registry.normalize(language)}[/yellow]")
        console.print(text)
        return

    if reverse:
        console.print(transliterator.to_latin(text, language))
    else:
        console.print(transliterator.to_native(text, language))


@cli.command()
@click.option("--script", help="Only show languages written in this script")
def languages(script: Optional[str]):
    """List supported languages."""
    router = _build_router()
    profiles = router.registry.profiles()
    if script:
        profiles = [p for p in profiles if p.script.lower() == script.lower()]

    table = Table(title=f"Supported languages ({len(profiles)})")
    table.add_column("Name", style="cyan")
    table.add_column("Code")
    table.add_column("Native name")
    table.add_column("Script")
    table.add_column("Order", justify="center")
    table.add_column("RTL", justify="center")

    for profile in profiles:
        table.add_row(
            profile.name,
            profile.code,
            profile.native_name,
            profile.script,
            profile.word_order.value,
            "yes" if profile.rtl else "",
        )

    console.print(table)


@cli.command()
@click.option("--language", "-l", help="Only show idioms with an equivalent in this language")
def idioms(language: Optional[str]):
    """List known idioms."""
    router = _build_router()
    if language:
        language = router.registry.normalize(language)
        entries = router.idioms.for_language(language)
    else:
        entries = router.idioms.entries()

    table = Table(title=f"Idioms ({len(entries)})")
    table.add_column("Phrase", style="cyan")
    table.add_column("Meaning")
    table.add_column("Category")
    if language:
        table.add_column(language.title())
    else:
        table.add_column("Languages", justify="right")

    for entry in sorted(entries, key=lambda e: e.phrase):
        last = entry.translation_for(language) if language else str(len(entry.translations))
        table.add_row(entry.phrase, entry.meaning, entry.category.value, last)

    console.print(table)


@cli.command()
@click.argument("text")
def analyze(text: str):
    """Show the tokens, parts of speech and lemmas of English TEXT."""
    router = _build_router()
    tokens = [t for t in router.reorderer.tokenize(text) if t.is_word]

    table = Table(title="Token analysis")
    table.add_column("#", justify="right", style="dim")
    table.add_column("Token", style="cyan")
    table.add_column("POS")
    table.add_column("Lemma")
    table.add_column("Features", style="dim")

    for i, token in enumerate(tokens, 1):
        features = token.features
        details = [
            f"{name}={value.value if hasattr(value, 'value') else value}"
            for name, value in (
                ("number", features.number),
                ("tense", features.tense),
                ("person", features.person),
            )
            if value is not None
        ]
        if features.is_negated:
            details.append("negated")
        table.add_row(str(i), token.text, token.pos.value, token.lemma, ", ".join(details))

    console.print(table)

    svo = router.reorderer.identify_svo(tokens)
    parts = [
        f"S={svo.subject.text if svo.subject else '-'}",
        f"V={svo.verb.text if svo.verb else '-'}",
        f"O={svo.object.text if svo.object else '-'}",
    ]
    console.print(f"[dim]Structure:[/dim] {' '.join(parts)}")


@cli.command()
@click.option("--host", default="127.0.0.1", help="Host to bind to")
@click.option("--port", type=int, default=8000, help="Port to bind to")
@click.option("--reload", is_flag=True, help="Enable auto-reload")
def serve(host: str, port: int, reload: bool):
    """Run the HTTP API."""
    _check_config()
    from .web.app import serve as run_server
    run_server(host, port, reload)


def _print_result_details(result: TranslationResult):
    """Print how a translation was produced."""
    color = "green" if result.confidence >= 0.8 else "yellow" if result.confidence >= 0.5 else "red"

    lines = [
        f"[dim]Languages:[/dim] {result.source_language} -> {result.target_language} ({result.direction.value})",
        f"[dim]Method:[/dim] {result.method.value}",
        f"[dim]Confidence:[/dim] [{color}]{result.confidence:.2f}[/{color}]",
    ]
    if result.english_pivot:
        lines.append(f"[dim]English pivot:[/dim] {result.english_pivot}")
    if result.idioms_found:
        lines.append(f"[dim]Idioms:[/dim] {', '.join(result.idioms_found)}")
    if result.unknown_words:
        lines.append(f"[yellow]Unknown words:[/yellow] {', '.join(result.unknown_words)}")
    if result.fallback_used:
        lines.append("[cyan]Model fallback used[/cyan]")
    if result.cached:
        lines.append("[dim]From cache[/dim]")

    console.print(Panel("\n".join(lines), title="Translation"))

    if result.corrections:
        table = Table(show_header=True)
        table.add_column("Correction", style="cyan")
        table.add_column("Original", max_width=30)
        table.add_column("Corrected", max_width=30)
        table.add_column("Reason", style="dim", max_width=40)
        for correction in result.corrections:
            table.add_row(correction.type.value, correction.original, correction.corrected, correction.reason)
        console.print(table)


if __name__ == "__main__":
    cli()
