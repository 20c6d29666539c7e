from builderkit.domain.errors import DomainError, UnknownFieldError
from builderkit.domain.product import Product, PRODUCT_SCHEMA
from builderkit.domain.schema import Schema
from builderkit.services.product_service import ProductService
from builderkit.services.user_service import UserService
from builderkit.adapters.demo_user_provider import DemoUserProvider
from builderkit.config import Settings, load_settings, configure_logging
from builderkit.api.colors import color_value
from typer import Exit, Option, Typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.panel import Panel
from typing import Any, Optional
import uvicorn


### COMMENTS
# ==========================================================
# CLI (Typer + Rich) — interfejs użytkownika dla builderkit.
# ==========================================================
# Rola:
# - Mapuje komendy na serwisy (demo/product/user) i uruchamia serwer HTTP (serve).
# - Wyświetla encje w czytelnej formie (tabele, panele, kolory wg typu pola).
# - Łapie DomainError i drukuje przyjazne komunikaty.
#
# Zasady:
# - Zero logiki biznesowej — deleguj do serwisów.
# - Jednorazowy bootstrap zależności (settings + logging + serwisy) w callbacku.


app = Typer(help="builderkit CLI — buildery encji Product/User")
console = Console()

settings: Settings | None = None
product_service: ProductService | None = None
user_service: UserService | None = None


@app.callback()
def main() -> None:
    """Bootstrap zależności na starcie procesu CLI."""
    global settings, product_service, user_service
    try:
        settings = load_settings()
    except DomainError as e:
        console.print(Panel.fit(f"❌ {e}", title="Błąd konfiguracji", border_style="red"))
        raise Exit(code=1)
    configure_logging(settings.log_level)
    product_service = ProductService()
    user_service = UserService(DemoUserProvider())


def render_products(items: list[Product]) -> None:
    """Renderuje tabelę Rich z kolumnami według schematu produktu."""

    table = Table(show_lines=True, header_style="bold")
    for name in PRODUCT_SCHEMA.names():
        table.add_column(name, no_wrap=True)

    for p in items:
        table.add_row(*(color_value(v) for v in p.to_dict().values()))

    console.print(table)


def parse_changes(schema: Schema, entries: list[str]) -> dict[str, Any]:
    """
    Zamienia wpisy `pole=wartość` na słownik z wartościami typu pola.

    :raises UnknownFieldError: Gdy pole nie istnieje.
    :raises ValueError: Gdy wpis nie ma formatu `pole=wartość` lub wartość nie pasuje do typu.
    """
    changes: dict[str, Any] = {}
    for entry in entries:
        name, sep, raw = entry.partition("=")
        if not sep or not name:
            raise ValueError(f"niepoprawny wpis {entry!r}, oczekiwano pole=wartość")
        spec = schema.get(name.strip())
        changes[spec.name] = spec.type(raw)
    return changes


@app.command("demo")
def demo() -> None:
    """
    Pokazowy przebieg: pocoMobile → samsung przez to_builder().

    - Buduje pocoMobile (12, "pocoMobile", 100).
    - Tworzy samsung z pocoMobile: zmienia id i nazwę, cena przechodzi bez zmian.
    - Wyświetla oba produkty.
    """
    console.print(Panel.fit("🚀 Start demonstracji", border_style="cyan"))

    poco_mobile, samsung = product_service.demo()
    render_products([poco_mobile, samsung])
    console.print(f"{escape(str(poco_mobile))} {escape(str(samsung))}")

    console.print(Panel.fit("🏁 Demo zakończone", border_style="cyan"))


@app.command("product")
def product(
    product_id: int = Option(0, "--id", "-i"),
    name: str = Option("", "--name", "-n"),
    price: float = Option(0.0, "--price", "-p"),
    sets: Optional[list[str]] = Option(None, "--set", "-s", help="Wariant: pole=wartość (można powtarzać)"),
) -> None:
    """
    Buduje produkt i opcjonalnie jego wariant.

    Flow:
    - product_service.create(...)
    - Jeśli podano --set: product_service.derive(produkt, **zmiany)
    - Błąd: UnknownFieldError / zły format → czerwony Panel.
    """
    try:
        base = product_service.create(product_id, name, price)
        items = [base]
        if sets:
            items.append(product_service.derive(base, **parse_changes(PRODUCT_SCHEMA, sets)))
        render_products(items)
    except UnknownFieldError as e:
        console.print(Panel.fit(
            f"❌ {e}\n[dim]Dostępne pola: {', '.join(PRODUCT_SCHEMA.names())}[/]",
            title="Nieznane pole",
            border_style="red",
        ))
        raise Exit(code=1)
    except ValueError as e:
        console.print(Panel.fit(
            f"❌ {escape(str(e))}\n[dim]Podpowiedź: użyj np.:[/] builderkit product -i 12 -s price=99.5",
            title="Błąd wejścia",
            border_style="red",
        ))
        raise Exit(code=1)


@app.command("user")
def user() -> None:
    """Pokazuje bieżącego użytkownika (ten sam, którego zwraca GET /user)."""
    current = user_service.get_current_user()
    lines = [f"{name}: {color_value(value)}" for name, value in current.to_dict().items()]
    console.print(Panel.fit(
        "\n".join(lines),
        title="Bieżący użytkownik",
        border_style="cyan",
    ))


@app.command("serve")
def serve(
    host: Optional[str] = Option(None, "--host"),
    port: Optional[int] = Option(None, "--port", min=1),
) -> None:
    """Uruchamia HTTP API (uvicorn); domyślne host/port z konfiguracji."""
    uvicorn.run(
        "builderkit.api.http:app",
        host=host or settings.host,
        port=port or settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    app()
