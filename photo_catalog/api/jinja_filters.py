from __future__ import annotations

from fastapi.templating import Jinja2Templates

from photo_catalog.core.formatting import format_long_date, join_values

filter_functions = []


def filter_function(function):
    filter_functions.append(function)
    return function


def register_all(templates: Jinja2Templates) -> None:
    for function in filter_functions:
        templates.env.filters[function.__name__] = function


@filter_function
def long_date(value):
    return format_long_date(value)


@filter_function
def comma_join(values):
    if not values:
        return ""
    return join_values(values)
