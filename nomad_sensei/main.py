"""NomadSensei terminal client"""

import asyncio
import os
import re
from typing import List, Optional

from rich.console import Console
from rich.progress import Progress, SpinnerColumn, TextColumn

from .config.config_loader import ConfigLoader, setup_logging
from .models.travel_models import ChatExchange, PipelineStage, TravelResponse, UserQuery
from .services.action_deriver import SAVE_ITINERARY_TARGET
from .services.travel_agent import TravelAgent, create_travel_agent

STAGE_DESCRIPTIONS = {
    PipelineStage.IDLE: "Starting...",
    PipelineStage.ANALYZING_IMAGE: "Analyzing image...",
    PipelineStage.PLANNING: "Planning searches...",
    PipelineStage.SEARCHING: "Searching the web...",
    PipelineStage.GENERATING: "Writing answer...",
    PipelineStage.DERIVING_ACTIONS: "Preparing actions...",
    PipelineStage.DONE: "Done",
}


def ask(agent: TravelAgent, user_query: UserQuery, console: Console) -> TravelResponse:
    """Run one query with a spinner that follows the pipeline stages"""
    with Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        console=console
    ) as progress:
        task = progress.add_task("[cyan]Thinking...", total=None)

        def on_stage(stage: PipelineStage) -> None:
            progress.update(task, description=f"[cyan]{STAGE_DESCRIPTIONS[stage]}")

        response = asyncio.run(agent.process_query(user_query.text, user_query.image, on_stage))
        progress.remove_task(task)
        return response


def render_response(response: TravelResponse, console: Console) -> None:
    console.print(f"\n[bold green]{response.title}[/bold green]\n")
    console.print(response.answer)

    if response.sources:
        console.print("\n[bold]Sources[/bold]")
        for source in response.sources:
            console.print(f"  {source.number}. {source.title} [blue]{source.url}[/blue]")

    if response.actions:
        console.print("\n[bold]Actions[/bold]")
        for action in response.actions:
            target = "" if action.url == SAVE_ITINERARY_TARGET else f" [blue]{action.url}[/blue]"
            console.print(f"  - {action.label}{target}")


def render_history(history: List[ChatExchange], console: Console) -> None:
    if not history:
        console.print("[yellow]No questions asked yet.[/yellow]")
        return
    for i, exchange in enumerate(history, start=1):
        asked = exchange.query.text or "(photo)"
        console.print(f"{i}. [{exchange.timestamp:%H:%M}] {asked} -> [cyan]{exchange.response.title}[/cyan]")


def save_itinerary(exchange: ChatExchange, directory: str = "itineraries") -> str:
    """Save an itinerary answer to a Markdown file"""
    os.makedirs(directory, exist_ok=True)
    slug = re.sub(r"[^a-z0-9]+", "_", exchange.query.text.lower()).strip("_")[:30] or "itinerary"
    filename = os.path.join(directory, f"{slug}.md")

    response = exchange.response
    content = f"# {exchange.query.text}\n\n"
    content += f"_Saved {exchange.timestamp:%Y-%m-%d %H:%M}_\n\n"
    content += f"{response.answer}\n\n"
    if response.sources:
        content += "## Sources\n"
        for source in response.sources:
            content += f"{source.number}. [{source.title}]({source.url})\n"

    with open(filename, "w", encoding="utf-8") as f:
        f.write(content)

    return filename


def offers_itinerary_save(response: TravelResponse) -> bool:
    return any(action.url == SAVE_ITINERARY_TARGET for action in response.actions)


def read_query(console: Console) -> Optional[UserQuery]:
    text = console.input("[bold]Ask NomadSensei:[/bold] ").strip()
    if text.lower() == "history":
        return None
    image_path = console.input("Image path (optional): ").strip()
    return UserQuery(text=text, image=image_path or None)


def main():
    """Main entry point for the terminal client"""
    console = Console()

    config = ConfigLoader.load_config()
    setup_logging(config.log_level)
    agent = create_travel_agent(config)
    history: List[ChatExchange] = []

    console.print("\n[bold blue]NomadSensei[/bold blue]")
    console.print("Ask about any destination, attach a photo, or request an itinerary.")
    console.print("Type 'history' to list this session's questions.")
    console.print("\nPress Ctrl+C to exit.\n")

    while True:
        try:
            user_query = read_query(console)
            if user_query is None:
                render_history(history, console)
                continue
            if not user_query.text and user_query.image is None:
                continue

            response = ask(agent, user_query, console)
            exchange = ChatExchange(query=user_query, response=response)
            history.append(exchange)
            render_response(response, console)

            if offers_itinerary_save(response):
                if console.input("\nSave this itinerary? (yes/no): ").strip().lower() == "yes":
                    try:
                        filename = save_itinerary(exchange)
                        console.print(f"[green]Saved to: {filename}[/green]")
                    except OSError as e:
                        console.print(f"[red]Could not save itinerary: {e}[/red]")

            console.print("\nAsk another question or press Ctrl+C to exit.\n")

        except (KeyboardInterrupt, EOFError):
            console.print("\n\n[yellow]Exiting NomadSensei...[/yellow]")
            break


if __name__ == "__main__":
    main()
