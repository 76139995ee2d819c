"""Templated AJAX submit -- JSON responses rendered by Handlebars.

A contact form whose submit button posts via AJAX. The server answers
with the form's model object as JSON; the browser renders it with the
Handlebars template ``contact-template`` into ``#contact-card``.

Requires: fastapi, python-multipart, uvicorn (optional -- skips gracefully)

Run:
    uvicorn app:app --reload
"""

from dataclasses import dataclass
from pathlib import Path

fastapi = None
try:
    from fastapi import FastAPI, Request
    from fastapi import Form as FormField
    from fastapi.responses import HTMLResponse, Response

    fastapi = FastAPI  # sentinel for importskip
except ImportError:
    pass

from kida import Environment, FileSystemLoader

from kida_ajax import Form, HeaderResponse, TemplatedSubmitButton, get_config, runtime_source
from kida_ajax.serializers import to_json

templates_dir = Path(__file__).parent / "templates"
env = Environment(loader=FileSystemLoader(str(templates_dir)), autoescape=True)


@dataclass
class Contact:
    name: str
    email: str
    age: int


button: TemplatedSubmitButton[Contact] = TemplatedSubmitButton(
    "save-contact",
    "contact-template",
    "#contact-card",
    to_json,
    callback_url="/contact/submit",
)


def render_page() -> str:
    """Full page with head contributions, template, form and button."""
    head = HeaderResponse()
    button.render_head(head)
    return env.get_template("page.html").render(
        title="Templated AJAX submit",
        head=head.to_html(),
        button=button.render_markup("Save"),
    )


if fastapi is not None:
    app = FastAPI()

    @app.get("/", response_class=HTMLResponse)
    async def index() -> str:
        return render_page()

    @app.post("/contact/submit")
    async def submit(
        request: Request,
        name: str = FormField(...),
        email: str = FormField(...),
        age: int = FormField(...),
    ) -> Response:
        form = Form("contact-form", Contact(name=name, email=email, age=age))
        return button.on_submit(request, form).to_starlette()

    @app.get(get_config().runtime_url)
    async def runtime() -> Response:
        return Response(runtime_source(), media_type="text/javascript")
else:
    app = None  # type: ignore[assignment]


# For test access via example_app fixture
output = render_page()


def main() -> None:
    if fastapi is None:
        print("FastAPI not installed. Install with: pip install fastapi python-multipart uvicorn")
        print(output)
        return
    print("Run with: uvicorn app:app --reload")
    print("Endpoints:")
    print("  GET  /                -- page with the contact form")
    print("  POST /contact/submit  -- JSON of the submitted contact")


if __name__ == "__main__":
    main()
