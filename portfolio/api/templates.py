"""HTML page templates.

Pages are rendered server-side with the theme marker already applied to
``<html>``, so the first paint matches the stored or OS preference. The
inline script only handles the toggle button, carousel keys and the
typewriter playback.
"""

from typing import Any

from jinja2 import DictLoader, Environment, select_autoescape

from portfolio.core.content import FOOTER_LINKS, NAV_LINKS, SITE_TITLE
from portfolio.core.theme import ThemeState

_BASE = """\
<!DOCTYPE html>
<html lang="en" class="{{ theme.css_class }}">
<head>
  <meta charset="utf-8" />
  <meta name="viewport" content="width=device-width, initial-scale=1" />
  <meta name="color-scheme" content="light dark" />
  <title>{% block title %}{{ site_title }}{% endblock %}</title>
  <style>
    :root, html.light {
      --bg: #ffffff; --text: #333333; --border: #e2e8f0; --accent: #4a5568;
    }
    html.dark {
      --bg: #000000; --text: #e2e8f0; --border: #ffffff; --accent: #ffffff;
    }
    body { background: var(--bg); color: var(--text); font-family: "Cutive Mono", monospace;
           max-width: 64rem; margin: 0 auto; padding: 1rem; }
    a { color: var(--accent); }
    nav, footer { display: flex; gap: 1rem; align-items: center; }
    .card { border: 1px solid var(--border); border-radius: 0.5rem; padding: 1rem; }
    .grid { display: grid; grid-template-columns: repeat(auto-fill, minmax(18rem, 1fr)); gap: 1.5rem; }
    .carousel { display: flex; gap: 0.5rem; align-items: center; }
    .slide { flex: 1; text-align: center; cursor: pointer; }
    .bar { height: 1rem; background: var(--accent); }
    .track { flex: 1; background: var(--border); border-radius: 0.5rem; overflow: hidden; }
  </style>
</head>
<body>
  <nav>
    {% for link in nav_links %}<a href="{{ link.url }}">{{ link.title }}</a>{% endfor %}
    <button id="theme-toggle" aria-label="Toggle theme">{{ "Light" if theme.value == "dark" else "Dark" }}</button>
  </nav>
  <main>{% block content %}{% endblock %}</main>
  <footer>
    {% for link in footer_links %}<a href="{{ link.url }}" target="_blank" rel="noopener noreferrer">{{ link.title }}</a>{% endfor %}
  </footer>
  <script>
    document.getElementById("theme-toggle").addEventListener("click", async () => {
      const res = await fetch("/api/theme/toggle", { method: "POST" });
      const body = await res.json();
      document.documentElement.className = body.css_class;
      for (const [id, url] of Object.entries(body.refresh)) {
        const img = document.getElementById(id);
        if (img) img.src = url;
      }
    });
  </script>
  {% block scripts %}{% endblock %}
</body>
</html>
"""

_HOME = """\
{% extends "base.html" %}
{% block content %}
  <section><h1 id="hero" aria-label="{{ words[0] }}"></h1></section>
  <section><a class="card" href="/projects">Projects Portal</a></section>
  <section>
    <h2>Week in Code: Hourly Breakdown</h2>
    {% if panels.coding_hours == "ready" %}
      <img id="coding_hours_chart" src="/charts/coding-hours.png?theme={{ theme.value }}" alt="Hours spent coding per day" />
    {% else %}<p>{{ "Loading..." if panels.coding_hours == "loading" else "No data available" }}</p>{% endif %}
  </section>
  <section>
    <h2>Dev Spectrum: This Week in Code</h2>
    {% if panels.languages == "ready" %}
      <img id="languages_chart" src="/charts/languages.png?theme={{ theme.value }}" alt="Language breakdown" />
      <ul>
      {% for share in languages %}
        <li>{% if share.docs_url %}<a href="{{ share.docs_url }}" target="_blank" rel="noopener noreferrer">{{ share.name }}</a>{% else %}{{ share.name }}{% endif %}: {{ "%.2f"|format(share.percent) }}%</li>
      {% endfor %}
      </ul>
    {% else %}<p>{{ "Loading..." if panels.languages == "loading" else "No data available" }}</p>{% endif %}
  </section>
{% endblock %}
{% block scripts %}
  <script>
    const frames = {{ frames | tojson }};
    const hero = document.getElementById("hero");
    let i = 0;
    const play = () => {
      const frame = frames[i];
      hero.textContent = frame.text + "|";
      i = (i + 1) % frames.length;
      setTimeout(play, frame.delay_ms);
    };
    if (frames.length) play();
  </script>
{% endblock %}
"""

_ABOUT = """\
{% extends "base.html" %}
{% block title %}About | {{ site_title }}{% endblock %}
{% block content %}
  <section class="card">
    <h1>About Me</h1>
    {% for paragraph in paragraphs %}<p>{{ paragraph }}</p>{% endfor %}
  </section>
  <section class="card">
    <h2>Coding Language Proficiency</h2>
    <p>Reflecting progress toward proficiency (based on {{ target_hours }} hours)</p>
    {% if skills_status == "ready" %}
      {% for skill in skills %}
        <div class="carousel"><span>{{ skill.name }}</span>
          <div class="track"><div class="bar" style="width: {{ skill.proficiency }}%"></div></div>
          <span>{{ "%.2f"|format(skill.proficiency) }}%</span></div>
      {% endfor %}
    {% else %}<p>{{ "Loading..." if skills_status == "loading" else "No data available" }}</p>{% endif %}
  </section>
  <section>
    <h2>Check Out My Coursework</h2>
    <div id="carousel" class="carousel" role="region" aria-roledescription="carousel"
         aria-live="polite" tabindex="0" data-index="{{ carousel.active_index }}">
      <button data-action="previous" aria-label="Previous slide">&larr;</button>
      <div id="slide" class="slide card" role="group" aria-roledescription="slide">
        <h3>{{ carousel.current_item.title }}</h3>
        <p>{{ carousel.current_item.description }}</p>
      </div>
      <button data-action="next" aria-label="Next slide">&rarr;</button>
    </div>
  </section>
{% endblock %}
{% block scripts %}
  <script>
    const region = document.getElementById("carousel");
    const slide = document.getElementById("slide");
    const navigate = async (payload) => {
      const res = await fetch("/api/carousel/navigate", {
        method: "POST",
        headers: { "Content-Type": "application/json" },
        body: JSON.stringify({ active_index: Number(region.dataset.index), ...payload }),
      });
      const body = await res.json();
      region.dataset.index = body.active_index;
      slide.querySelector("h3").textContent = body.item.title;
      slide.querySelector("p").textContent = body.item.description;
      return body;
    };
    region.addEventListener("keydown", (event) => {
      if (event.key === "ArrowLeft" || event.key === "ArrowRight") {
        event.preventDefault();
        navigate({ action: "key", key: event.key });
      }
    });
    region.querySelectorAll("button[data-action]").forEach((button) =>
      button.addEventListener("click", () => navigate({ action: button.dataset.action })));
    slide.addEventListener("click", async () => {
      const res = await fetch("/api/carousel/open", {
        method: "POST",
        headers: { "Content-Type": "application/json" },
        body: JSON.stringify({ active_index: Number(region.dataset.index) }),
      });
      const link = await res.json();
      window.open(link.url, link.target);
    });
  </script>
{% endblock %}
"""

_PROJECTS = """\
{% extends "base.html" %}
{% block title %}Projects | {{ site_title }}{% endblock %}
{% block content %}
  <h1>My Projects</h1>
  <div class="grid">
  {% for project in projects %}
    <a class="card" href="{{ project.link }}" aria-label="Link to {{ project.title }}">
      <h2>{{ project.title }}</h2>
      <p>{{ project.description }}</p>
      {% if project.content %}<p>{{ project.content }}</p>{% endif %}
      {% if project.footer %}<p><small>{{ project.footer }}</small></p>{% endif %}
    </a>
  {% endfor %}
  </div>
{% endblock %}
"""

_USES = """\
{% extends "base.html" %}
{% block title %}Uses | {{ site_title }}{% endblock %}
{% block content %}
  <h1>Uses</h1>
  {% for section in sections %}
    <section>
      <h2>{{ section.title }}</h2>
      <ul>
      {% for item in section.items %}<li><strong>{{ item.label }}:</strong> {{ item.detail }}</li>{% endfor %}
      </ul>
    </section>
  {% endfor %}
{% endblock %}
"""

TEMPLATES = {
    "base.html": _BASE,
    "home.html": _HOME,
    "about.html": _ABOUT,
    "projects.html": _PROJECTS,
    "uses.html": _USES,
}


def create_environment() -> Environment:
    env = Environment(
        loader=DictLoader(TEMPLATES),
        autoescape=select_autoescape(default_for_string=True, default=True),
    )
    env.globals.update(
        site_title=SITE_TITLE,
        nav_links=NAV_LINKS,
        footer_links=FOOTER_LINKS,
    )
    return env


_environment = create_environment()


def render_page(name: str, theme: ThemeState, **context: Any) -> str:
    """Render a page template with the theme marker applied."""
    return _environment.get_template(name).render(theme=theme, **context)
