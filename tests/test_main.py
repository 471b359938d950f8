"""Tests for the terminal client helpers"""

from rich.console import Console

from nomad_sensei.main import offers_itinerary_save, render_history, render_response, save_itinerary
from nomad_sensei.models.travel_models import Action, ChatExchange, Source, TravelResponse, UserQuery


def itinerary_exchange():
    response = TravelResponse(
        title="Travel Information",
        answer="Day 1: Meiji Shrine¹",
        sources=[Source(number=1, title="Meiji Jingu", url="https://meiji.example")],
        actions=[Action(label="Save Itinerary", url="#save")],
    )
    return ChatExchange(query=UserQuery(text="3-day Tokyo itinerary!"), response=response)


def test_save_itinerary_writes_markdown(tmp_path):
    exchange = itinerary_exchange()

    filename = save_itinerary(exchange, directory=str(tmp_path))

    assert filename.endswith("3_day_tokyo_itinerary.md")
    content = (tmp_path / "3_day_tokyo_itinerary.md").read_text(encoding="utf-8")
    assert content.startswith("# 3-day Tokyo itinerary!")
    assert "1. [Meiji Jingu](https://meiji.example)" in content


def test_offers_itinerary_save():
    assert offers_itinerary_save(itinerary_exchange().response)
    assert not offers_itinerary_save(TravelResponse.error())


def test_render_response_and_history():
    console = Console(record=True, width=120)
    exchange = itinerary_exchange()

    render_response(exchange.response, console)
    render_history([exchange], console)

    output = console.export_text()
    assert "Day 1: Meiji Shrine" in output
    assert "1. Meiji Jingu" in output
    assert "Save Itinerary" in output
    assert "3-day Tokyo itinerary!" in output
