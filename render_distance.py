import sys

import django
from django.core.exceptions import ImproperlyConfigured


def main(argv=None):
    args = sys.argv[1:] if argv is None else argv
    if not 1 <= len(args) <= 2:
        raise SystemExit("usage: render_distance.py FROM [TO]")

    # Settings come from the caller's DJANGO_SETTINGS_MODULE
    try:
        django.setup()
    except ImproperlyConfigured as exc:
        raise SystemExit(f"Failed to configure Django settings: {exc}")

    from django.template import engines
    from timedistance.dates import InvalidDateError

    template = engines["django"].from_string(
        "{% load time_distance %}"
        "{% if has_to %}{{ from|time_distance:to }}{% else %}{{ from|time_distance }}{% endif %}"
    )
    has_to = len(args) > 1
    context = {"from": args[0], "to": args[1] if has_to else None, "has_to": has_to}
    try:
        output = template.render(context)
    except InvalidDateError as exc:
        raise SystemExit(str(exc))

    print(output)
    return output


if __name__ == "__main__":
    main()
