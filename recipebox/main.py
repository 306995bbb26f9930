import gradio as gr

from recipebox.config import settings
from recipebox.services.search_service import RecipeSearchService

service = RecipeSearchService()

OPEN_IN_NEW_TAB_JS = """
(url) => {
    if (url) {
        window.open(url, "_blank");
    }
    return url;
}
"""


def search_fn(query: str) -> str:
    return service.render_results(query)


def random_fn(query: str) -> str:
    pick = service.pick_random(query)
    if pick.recipe is None:
        # One toast per click, each dismissed on its own.
        gr.Warning(pick.notice)
        return ""
    return pick.url or ""


def build_demo() -> gr.Blocks:
    with gr.Blocks(title="Rezepte") as demo:
        gr.Markdown("# Rezepte")
        if service.last_error:
            gr.Markdown(f"**{service.last_error}**")
        with gr.Row():
            query = gr.Textbox(placeholder="Suchen...", show_label=False, scale=4)
            random_button = gr.Button("Zufälliges Rezept", scale=1)
        results = gr.Markdown(search_fn(""))
        picked_url = gr.Textbox(visible=False)

        query.change(search_fn, inputs=query, outputs=results, trigger_mode="always_last")
        random_button.click(random_fn, inputs=query, outputs=picked_url).then(
            None, inputs=picked_url, outputs=picked_url, js=OPEN_IN_NEW_TAB_JS
        )
    return demo


if __name__ == "__main__":
    app = build_demo()
    app.launch(server_name=settings.gradio_server_name, server_port=settings.gradio_server_port)
