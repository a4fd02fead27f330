from django.apps import AppConfig


class TimeDistanceConfig(AppConfig):
    name = 'timedistance'
    verbose_name = 'Time distance'
