"""
Interactive menu for listing and editing the resource list.
"""

import re
import sys

from django.conf import settings
from django.core.exceptions import ValidationError
from django.core.management.base import BaseCommand

from resources import store
from resources.dataclasses import Resource
from resources.services.report_formatter import write_report
from resources.validators import validate_url

MENU = (
    "1) List resources",
    "2) Add resource",
    "3) Remove resource",
    "4) Update resource",
    "5) Exit",
)

LIST, ADD, REMOVE, UPDATE, EXIT = range(1, 6)

leading_int_re = re.compile(r"\s*([+-]?\d+)")


def parse_leading_int(value):
    """
    Read the integer at the start of value, ignoring anything after it.

    "2 add" and "2.5" both read as 2. Returns None when value does not start
    with an integer.
    """
    match = leading_int_re.match(value)
    if match is None:
        return None
    return int(match.group(1))


class Command(BaseCommand):
    help = """
    Interactively list, add, remove and update resources.
    Every change is saved to the resources file and the README is regenerated.
    """
    stealth_options = ("stdin",)

    def execute(self, *args, **options):
        self.stdin = options.get("stdin", sys.stdin)  # Used for testing
        return super().execute(*args, **options)

    def ask(self, prompt):
        """Write prompt and block until a line of input arrives."""
        self.stdout.write(prompt, ending="")
        self.stdout.flush()
        line = self.stdin.readline()
        if not line:
            raise EOFError
        return line.rstrip("\r\n")

    def ask_description(self, prompt):
        description = self.ask(prompt)
        return description or None

    def ask_index(self, prompt, resources):
        """
        Ask for a one-based position and return it zero-based.

        Returns None, after telling the user why, when the answer is not a
        position in resources.
        """
        number = parse_leading_int(self.ask(prompt))
        if number is None:
            self.stdout.write("Invalid index")
            return None
        index = number - 1
        if not store.is_valid_index(resources, index):
            self.stdout.write("Invalid index range")
            return None
        return index

    def ask_resource(self, url_prompt, description_prompt):
        url = self.ask(url_prompt)
        description = self.ask_description(description_prompt)
        try:
            validate_url(url)
        except ValidationError as e:
            self.stdout.write(self.style.ERROR(f"Invalid URL: {' '.join(e.messages)}"))
            return None
        return Resource(url=url, description=description)

    def persist(self, resources):
        store.save(settings.RESOURCES_FILE, resources)
        write_report(settings.RESOURCES_README_FILE, resources)

    def list_resources(self, resources):
        for number, resource in enumerate(resources, 1):
            self.stdout.write(f"{number}. {resource.display_line()}")

    def handle(self, *args, **options):
        resources = store.load(settings.RESOURCES_FILE)
        running = True
        while running:
            try:
                resources, running = self.step(resources)
            except EOFError:
                running = False
        if self.stdin is not sys.stdin:
            self.stdin.close()

    def step(self, resources):
        """
        Run one pass of the menu.

        Returns the resources it leaves and whether the menu should keep running.
        """
        for line in MENU:
            self.stdout.write(line)
        choice = parse_leading_int(self.ask("Choose an option: "))
        if choice is None:
            self.stdout.write("Invalid selection")
            return resources, True

        if choice == LIST:
            self.list_resources(resources)
        elif choice == ADD:
            resource = self.ask_resource("URL: ", "Description (optional): ")
            if resource is not None:
                resources = store.add(resources, resource)
                self.persist(resources)
        elif choice == REMOVE:
            index = self.ask_index("Index to remove: ", resources)
            if index is not None:
                resources = store.remove_at(resources, index)
                self.persist(resources)
        elif choice == UPDATE:
            index = self.ask_index("Index to update: ", resources)
            if index is not None:
                resource = self.ask_resource(
                    "New URL: ", "New Description (optional): "
                )
                if resource is not None:
                    resources = store.replace_at(resources, index, resource)
                    self.persist(resources)
        elif choice == EXIT:
            return resources, False
        else:
            self.stdout.write("Unknown option")
        return resources, True
