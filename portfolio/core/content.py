"""Site content: copy, project lists and link tables.

Plain data, kept out of the templates so the API and the HTML pages serve
the same records.
"""

from dataclasses import dataclass, field

from portfolio.core.carousel_logic import CarouselItem

SITE_TITLE = "Alex | Portfolio"
OWNER_NAME = "Alex"


@dataclass(frozen=True)
class NavLink:
    title: str
    url: str


@dataclass(frozen=True)
class ProjectCard:
    """A project in the showcase grid."""

    title: str
    description: str
    link: str
    content: str | None = None
    footer: str | None = None


@dataclass(frozen=True)
class UsesItem:
    label: str
    detail: str


@dataclass(frozen=True)
class UsesSection:
    title: str
    items: tuple[UsesItem, ...] = field(default_factory=tuple)


NAV_LINKS: tuple[NavLink, ...] = (
    NavLink("Home", "/"),
    NavLink("About", "/about"),
    NavLink("Projects", "/projects"),
    NavLink("Uses", "/uses"),
)

FOOTER_LINKS: tuple[NavLink, ...] = (
    NavLink("GitHub", "https://github.com/alexiwisteria"),
    NavLink("WakaTime", "https://wakatime.com/@alexiwisteria"),
)

TYPEWRITER_WORDS: tuple[str, ...] = (
    f"Hello, I'm {OWNER_NAME}.",
    "Code wizard apprentice, always learning.",
    "Java enthusiast.",
)

ABOUT_PARAGRAPHS: tuple[str, ...] = (
    "I got hooked on software engineering because I love figuring out how "
    "things work, and how to make them work better. Right now, I'm a Software "
    "Engineering student at Ensign College, diving into everything from coding "
    "basics to problem-solving in courses like Data Structures and Discrete "
    "Math. My goal is to build software that's solid, user-friendly, and "
    "genuinely useful.",
    "I also work as a Help Desk Technician at Ensign, where I had a chance to "
    "jump into a big project: helping transition our whole campus to a new "
    "WiFi network. From troubleshooting network quirks to making sure "
    "everything was stable, it taught me a lot about staying calm under "
    "pressure and focusing on the details. This experience reinforced my "
    "passion for Quality Assurance and full stack development.",
)

COURSEWORK: tuple[CarouselItem, ...] = (
    CarouselItem(
        title="Data Structures",
        description="Linked lists, trees and hash maps implemented from scratch.",
        link="https://example.com/project1",
    ),
    CarouselItem(
        title="Frontend Applications",
        description="Responsive interfaces built with React and Next.js.",
        link="https://example.com/project2",
    ),
    CarouselItem(
        title="Object Oriented Programming",
        description="Class design, interfaces and testing in Java.",
        link="https://example.com/project3",
    ),
)

PROJECTS: tuple[ProjectCard, ...] = (
    ProjectCard(
        title="AI Grading Project - Studio E",
        description=(
            "AIOps: a team-focused AI project using the ChatGPT API to explore "
            "data pipelines, model optimization and prompt engineering for an "
            "automated grading system."
        ),
        footer=(
            "Technologies used: Markdown, Git, GitHub Pull Requests, IntelliJ, "
            "OpenAI API, Python, PyTest, Canvas API, Agile Methodology, JSON."
        ),
        link="https://iron-pump-44b.notion.site/AI-Grading-Project-Studio-E-17879a1c05d380ca8d48f75d560f92ab",
    ),
    ProjectCard(
        title="Mini Project: First Contributions",
        description=(
            "Contributed to First Contributions, a beginner-friendly open-source "
            "project that teaches developers how to make their first pull request."
        ),
        footer="Technologies used: Markdown, Git, GitHub Pull Requests, IntelliJ",
        link="https://github.com/firstcontributions/first-contributions/pull/91322",
    ),
    ProjectCard(
        title="Mini Project: String Reversal Challenge",
        description=(
            "A Java program that reverses the order of words in a sentence, with "
            "modular methods for splitting, in-place array reversal and "
            "reassembly, validated by JUnit 5 tests."
        ),
        footer="Technologies used: Java, JUnit 5, IntelliJ, Algorithm Design",
        link="https://github.com/alexiwisteria/StringReversal",
    ),
    ProjectCard(
        title="Mini Project: Two Sum Java Project",
        description=(
            "The classic Two Sum problem solved in O(n) with a HashMap, with unit "
            "tests covering normal and edge cases."
        ),
        footer="Technologies used: Java, HashMap, JUnit 5, IntelliJ",
        link="https://github.com/alexiwisteria/TwoSum",
    ),
    ProjectCard(
        title="Mini Project: FizzBuzz Java Project",
        description=(
            "FizzBuzz up to 10,000 produced as a comma-separated string, with "
            "tests for normal and edge cases."
        ),
        footer="Technologies used: Java, ArrayList, JUnit 5, IntelliJ",
        link="https://github.com/alexiwisteria/FizzBuzz",
    ),
)

USES_SECTIONS: tuple[UsesSection, ...] = (
    UsesSection(
        "Development Tools",
        (
            UsesItem("Editor", "GitHub Codespaces - cloud-based development environments."),
            UsesItem("IDE (Java)", "IntelliJ - Java development and advanced debugging."),
            UsesItem("IDE (Web)", "WebStorm - JavaScript and web-focused projects."),
            UsesItem("Version Control", "Git & GitHub - managing and sharing projects."),
            UsesItem("Framework", "React & Next.js - responsive web applications."),
            UsesItem("Testing", "JUnit, Vitest, Playwright - testing and quality assurance."),
        ),
    ),
    UsesSection(
        "Design & Prototyping",
        (UsesItem("Prototyping", "Figma - wireframes and design mockups."),),
    ),
    UsesSection(
        "Hardware",
        (UsesItem("Computer", "MacBook Pro - main machine for development."),),
    ),
    UsesSection(
        "Other Essentials",
        (UsesItem("Productivity", "Discord - quick notes."),),
    ),
)

# Languages shown by the skills widget, in feed order
RELEVANT_SKILLS: frozenset[str] = frozenset(
    {
        "Java",
        "Git",
        "JavaScript",
        "React",
        "Next.js",
        "JUnit",
        "Vitest",
        "Playwright",
        "Python",
        "HTML",
        "CSS",
    }
)

SKILLS_TARGET_HOURS = 540

LANGUAGE_ICONS: dict[str, str] = {
    "Python": "python",
    "JavaScript": "js-square",
    "Java": "java",
    "PHP": "php",
    "HTML": "html5",
    "CSS": "css3-alt",
    "Swift": "swift",
    "JSON": "json",
    "Markdown": "markdown",
}
DEFAULT_LANGUAGE_ICON = "file-code"

LANGUAGE_DOCS: dict[str, str] = {
    "Python": "https://docs.python.org/3/",
    "JavaScript": "https://developer.mozilla.org/en-US/docs/Web/JavaScript",
    "Java": "https://docs.oracle.com/javase/8/docs/",
    "PHP": "https://www.php.net/docs.php",
    "HTML": "https://developer.mozilla.org/en-US/docs/Web/HTML",
    "CSS": "https://developer.mozilla.org/en-US/docs/Web/CSS",
    "Swift": "https://developer.apple.com/documentation/swift",
    "JSON": "https://www.json.org/json-en.html",
    "Markdown": "https://www.markdownguide.org/",
}
