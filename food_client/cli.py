"""
Terminal front end for the Food Catalog API
"""
# stdlib
import enum
import json
import logging
from typing import Any, Dict, Optional

# third-party
import click

# package
from . import __version__
from .api import DEFAULT_API_URL, ApiError, FoodApi
from .forms import FORM_FIELDS, validate_food_form
from .page import DELETE_PROMPT, PAGE_SIZE, FoodPage
from .queries import FoodQueries
from .render import render_field_errors, render_food, render_pager, render_table

_log = logging.getLogger(__name__)


class ExitCode(enum.IntEnum):
    OK = 0
    ERROR = 1
    INVALID_USAGE = 2
    INVALID_INPUT = 3
    NOT_FOUND = 4
    API_ERROR = 5


class CatalogCommandError(click.ClickException):
    exit_code = ExitCode.ERROR


class InvalidInput(CatalogCommandError):
    exit_code = ExitCode.INVALID_INPUT

    @classmethod
    def fields(cls, errors: Dict[str, str]):
        return cls("Invalid input:\n" + render_field_errors(errors))


class NotFound(CatalogCommandError):
    exit_code = ExitCode.NOT_FOUND


class ApiFailure(CatalogCommandError):
    exit_code = ExitCode.API_ERROR

    @classmethod
    def from_api_error(cls, err: ApiError) -> CatalogCommandError:
        if err.field_errors:
            return InvalidInput.fields(err.field_errors)
        if err.is_not_found:
            return NotFound(str(err))
        return cls(str(err))


class MissingRequired(CatalogCommandError):
    exit_code = ExitCode.INVALID_USAGE


def level_from_verbosity(vb):
    if vb >= 2:
        return logging.DEBUG
    if vb == 1:
        return logging.INFO
    return logging.WARNING


def _food_options(func):
    """Options shared by `add` and `edit`, one per form field"""
    options = [
        click.option("--name", help="Food name"),
        click.option("--rating", help="Rating from 0 to 5"),
        click.option("--food-image", help="URL of the food picture"),
        click.option("--restaurant-name", help="Restaurant serving the food"),
        click.option("--restaurant-image", help="URL of the restaurant picture"),
        click.option("--status", "restaurant_status",
                     type=click.Choice(["open", "closed"]), help="Restaurant status"),
    ]
    for option in reversed(options):
        func = option(func)
    return func


def _form_from_options(options: Dict[str, Any]) -> Dict[str, Any]:
    return {k: v for k, v in options.items() if k in FORM_FIELDS and v is not None}


@click.group()
@click.version_option(version=__version__)
@click.option(
    "--api-url",
    envvar="FOOD_API_URL",
    default=DEFAULT_API_URL,
    show_default=True,
    help="Base URL of the Food Catalog API",
)
@click.option("--verbose", "-v", count=True, help="Increase log verbosity")
@click.pass_context
def command_base(ctx, api_url, verbose):
    logging.basicConfig(level=level_from_verbosity(verbose))
    if ctx.obj is None:
        api = FoodApi(api_url)
        ctx.call_on_close(api.close)
        ctx.obj = FoodQueries(api)
    _log.debug(f"Using API at {api_url}")


@command_base.command(name="list", help="List foods, optionally filtered by name")
@click.option("--name", default="", help="Part of the food name, any case")
@click.option("--page", type=click.IntRange(min=1), default=1, show_default=True)
@click.option("--limit", type=click.IntRange(min=1), default=PAGE_SIZE, show_default=True)
@click.option("--json", "as_json", is_flag=True, help="Print the raw JSON response")
@click.pass_obj
def list_foods(queries: FoodQueries, name, page, limit, as_json):
    try:
        result = queries.foods(page=page, limit=limit, name=name)
    except ApiError as err:
        raise ApiFailure.from_api_error(err) from err
    if as_json:
        click.echo(json.dumps(result, indent=2))
        return
    click.echo(render_table(result["data"]))
    click.echo(render_pager(result["meta"], name))


@command_base.command(name="add", help="Add a food")
@_food_options
@click.pass_obj
def add_food(queries: FoodQueries, **options):
    form = validate_food_form(_form_from_options(options))
    if not form.ok:
        raise InvalidInput.fields(form.errors)
    try:
        created = queries.add_food(form.data)
    except ApiError as err:
        raise ApiFailure.from_api_error(err) from err
    click.echo(render_food(created, title="Created food:"))


@command_base.command(name="edit", help="Change some fields of a food")
@click.argument("food_id", type=click.IntRange(min=1))
@_food_options
@click.pass_obj
def edit_food(queries: FoodQueries, food_id, **options):
    changes = _form_from_options(options)
    if not changes:
        raise MissingRequired("Nothing to update, pass at least one field option")
    form = validate_food_form(changes, partial=True)
    if not form.ok:
        raise InvalidInput.fields(form.errors)
    try:
        updated = queries.update_food(food_id, **form.data)
    except ApiError as err:
        raise ApiFailure.from_api_error(err) from err
    click.echo(render_food(updated, title="Updated food:"))


@command_base.command(name="delete", help="Delete a food")
@click.argument("food_id", type=click.IntRange(min=1))
@click.option("--yes", "-y", is_flag=True, help="Do not ask for confirmation")
@click.pass_obj
def delete_food(queries: FoodQueries, food_id, yes):
    if not yes and not click.confirm(DELETE_PROMPT, default=False):
        click.echo("Cancelled.")
        return
    try:
        queries.delete_food(food_id)
    except ApiError as err:
        raise ApiFailure.from_api_error(err) from err
    click.echo(f"Deleted food {food_id}.")


# ---- interactive ----------------------------------------------------------


def _prompt_form(defaults: Dict[str, Any]) -> Dict[str, Any]:
    form = {}
    for field in FORM_FIELDS:
        default = defaults.get(field)
        if field == "restaurant_status":
            form[field] = click.prompt(
                field, type=click.Choice(["open", "closed"]),
                default=default or "open")
        else:
            form[field] = click.prompt(
                field, default="" if default is None else str(default),
                show_default=default is not None)
    return form


def _fill_form(page: FoodPage, defaults: Dict[str, Any]) -> Optional[dict]:
    while page.form_open:
        saved = page.submit(_prompt_form(defaults))
        if saved is not None:
            return saved
        if page.error:
            page.close_form()
            return None
        click.secho(render_field_errors(page.field_errors), fg="red")
        if not click.confirm("Try again?", default=True):
            page.close_form()
    return None


def _find_on_page(page: FoodPage, food_id: int) -> Optional[dict]:
    for item in page.items:
        if item["id"] == food_id:
            return item
    return None


@command_base.command(name="browse", help="Page through foods interactively")
@click.option("--limit", type=click.IntRange(min=1), default=PAGE_SIZE, show_default=True)
@click.pass_obj
def browse(queries: FoodQueries, limit):
    page = FoodPage(queries, limit=limit)
    while True:
        page.load()
        click.echo(render_table(page.items))
        click.echo(render_pager(page.meta, page.search))
        if page.error:
            click.secho(f"Error: {page.error}", fg="red")
            page.dismiss_error()

        actions = []
        if page.has_prev:
            actions.append("[p]rev")
        if page.has_next:
            actions.append("[n]ext")
        actions += ["[s]earch", "[a]dd", "[e]dit", "[d]elete", "[q]uit"]
        choice = click.prompt(" ".join(actions), default="q").strip().lower()

        if choice == "q":
            break
        elif choice == "n":
            if not page.next_page():
                click.echo("Already on the last page.")
        elif choice == "p":
            if not page.prev_page():
                click.echo("Already on the first page.")
        elif choice == "s":
            page.set_search(click.prompt("Search", default="", show_default=False))
            page.flush_search(force=True)
        elif choice == "a":
            page.open_create()
            saved = _fill_form(page, {})
            if saved:
                click.echo(f"Added food {saved['id']}.")
        elif choice == "e":
            food_id = click.prompt("ID", type=int)
            food = _find_on_page(page, food_id)
            if food is None:
                click.echo(f"No food with id {food_id} on this page.")
                continue
            page.open_edit(food)
            saved = _fill_form(page, food)
            if saved:
                click.echo(f"Updated food {saved['id']}.")
        elif choice == "d":
            food_id = click.prompt("ID", type=int)
            if page.delete(food_id, confirm=lambda msg: click.confirm(msg, default=False)):
                click.echo(f"Deleted food {food_id}.")
        else:
            click.echo(f"Unknown action {choice!r}.")


if __name__ == "__main__":
    command_base()
