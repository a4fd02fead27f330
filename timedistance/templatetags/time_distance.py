from django import template

from timedistance.distance import format_distance, format_months

register = template.Library()


@register.filter(is_safe=True)
def time_distance(value, arg=None):
    """{{ started|time_distance }} or {{ started|time_distance:ended }}"""
    return format_distance(value, arg)


@register.filter(is_safe=True)
def month_distance(total_months):
    """Convert a number of months to years and months format.

    A value that is not a whole number raises ValueError from int().
    """
    return format_months(int(total_months))
