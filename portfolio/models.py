from dataclasses import dataclass, field
from datetime import date
from typing import List

UNTITLED = "Untitled"


@dataclass
class Post:
    """A blog post resolved from one Markdown file of the content store."""

    identifier: str
    title: str = UNTITLED
    tags: List[str] = field(default_factory=list)
    # Reserved until posts carry a publication date
    date: str = ""
    previous_identifier: str = ""
    next_identifier: str = ""

    @property
    def link(self):
        return blog_link(self.identifier)

    @property
    def previous_link(self):
        return blog_link(self.previous_identifier) if self.previous_identifier else ""

    @property
    def next_link(self):
        return blog_link(self.next_identifier) if self.next_identifier else ""


def blog_link(identifier):
    return f"/blogs/{identifier}"


@dataclass
class Project:
    title: str
    thumbnail: str  # path to thumbnail image
    link: str  # deployed project, if any


@dataclass
class BlogCard:
    """Blog teaser shown on the home page."""

    title: str
    thumbnail: str
    link: str


@dataclass
class Skill:
    name: str
    icon: str


@dataclass
class PageData:
    title: str
    projects: List[Project] = field(default_factory=list)
    blogs: List[BlogCard] = field(default_factory=list)
    skills: List[Skill] = field(default_factory=list)
    today: date = field(default_factory=date.today)
