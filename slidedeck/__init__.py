"""Django project package for slidedeck."""
