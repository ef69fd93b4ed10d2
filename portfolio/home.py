from datetime import date

from portfolio.models import BlogCard, PageData, Project, Skill, blog_link


def load_projects():
    return [
        Project(
            title="Trip Tracker website using Go, Templ, HTMX, and TailwindCSS",
            thumbnail="/static/img/project1.png",
            link="https://fromnto.cloud",
        ),
    ]


def load_blogs():
    return [
        BlogCard(title="Beginner's Guide to HPCs", thumbnail="/static/img/blog1.png", link=blog_link("hpc")),
    ]


def load_skills():
    return [
        Skill(name="GoLang", icon="https://cdn.simpleicons.org/go"),
        Skill(name="Kubernetes", icon="https://cdn.simpleicons.org/kubernetes/326CE5"),
        Skill(name="Python", icon="https://cdn.simpleicons.org/python"),
        Skill(name="Typescript", icon="https://cdn.simpleicons.org/typescript"),
        Skill(name="Kotlin", icon="https://cdn.simpleicons.org/kotlin"),
        Skill(name="Rust", icon="https://cdn.simpleicons.org/rust/ffffff"),
        Skill(name="Kafka", icon="https://cdn.simpleicons.org/apachekafka/ffffff"),
    ]


def build_page_data(settings, today=None):
    """Home page data: static lists plus the site title and today's date."""
    return PageData(
        title=settings.site_title,
        projects=load_projects(),
        blogs=load_blogs(),
        skills=load_skills(),
        today=today or date.today(),
    )
