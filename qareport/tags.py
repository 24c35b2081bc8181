"""Map scenario tags to report categories, priorities and descriptions.

The mappings are fixed lookup tables taken from the configuration.
Tags may be given with or without the leading @ that Gherkin uses.
"""

from typing import Iterable

from qareport import config
from qareport.testcasedef import Priority


def normalize_tag(tag: str) -> str:
    """Return the tag in canonical form: lower case with a leading @."""
    tag = tag.strip().lower()
    return tag if tag.startswith('@') else '@' + tag


def category_from_tags(tags: Iterable[str]) -> str:
    """Return the category of the first tag that names one."""
    category_tags = config.get('category_tags')
    for tag in tags:
        if (category := category_tags.get(normalize_tag(tag))):
            return category
    return config.get('default_category')


def priority_from_tags(tags: Iterable[str]) -> Priority:
    """Return the priority given by the tags.

    An explicit priority tag wins over the priority implied by the type of test.
    """
    tagset = [normalize_tag(t) for t in tags]
    for tag, priority in config.get('priority_tags'):
        if tag in tagset:
            return Priority[priority]

    type_tags = config.get('priority_type_tags')
    for tag in tagset:
        if tag in type_tags:
            return Priority[type_tags[tag]]

    return Priority[config.get('default_priority')]


def description_for_category(category: str) -> str:
    return config.get('category_descriptions').get(category, config.get('default_description'))
