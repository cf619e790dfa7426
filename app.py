import gradio as gr

from json_formatter.config import get_settings
from json_formatter.editing import TABLE_HEADERS
from json_formatter.handlers import (
    handle_copy_result,
    handle_download,
    handle_generate,
    handle_input_change,
    handle_mandatory_change,
    handle_row_select,
    handle_table_select,
    handle_type_change,
    refresh_export_view,
    start_session,
)
from json_formatter.logging_utils import configure_logging
from json_formatter.models import TYPE_OPTIONS

settings = get_settings()

# Runs in the browser before handle_copy_result; its return values replace the inputs.
COPY_TO_CLIPBOARD_JS = """
async (text, copied) => {
  if (!text) { return [text, false]; }
  try {
    await navigator.clipboard.writeText(text);
    return [text, true];
  } catch (error) {
    console.error("Failed to copy to clipboard:", error);
    return [text, false];
  }
}
"""

# --- UI Definition ---
with gr.Blocks(title="JSON Data Formatter") as demo:
    gr.Markdown("# JSON Data Formatter")
    gr.Markdown("Paste a JSON array of `{line, name}` objects, set titles, then adjust types and mandatory flags.")

    # State
    input_records_state = gr.State(value=[])
    records_state = gr.State(value=[])
    document_id_state = gr.State(value="")
    section_id_state = gr.State(value="")

    with gr.Row():
        # Left Panel: Input
        with gr.Column(scale=1):
            gr.Markdown("### 1. Titles")
            document_title = gr.Textbox(label="Document Title", placeholder="Enter document title")
            section_title = gr.Textbox(
                label="Section Title",
                value=settings.default_section_title,
                placeholder="Enter section title",
            )

            gr.Markdown("### 2. Paste JSON Input")
            input_text = gr.Textbox(
                label="JSON Input",
                lines=5,
                placeholder='[{"line": "1", "name": "Fire extinguisher"}]',
            )
            process_btn = gr.Button("Process Input", variant="primary")
            status_msg = gr.Textbox(label="Status", interactive=False)

        # Right Panel: Table & Editor
        with gr.Column(scale=1):
            gr.Markdown("### 3. Data Table")
            data_table = gr.Dataframe(
                headers=TABLE_HEADERS,
                datatype=["str", "str", "str", "str", "bool"],
                col_count=(len(TABLE_HEADERS), "fixed"),
                interactive=False,
                label="Records (click a row to edit it)",
            )

            gr.Markdown("### 4. Edit Record")
            row_selector = gr.Dropdown(label="Row", choices=[], value=None, interactive=True)
            with gr.Row():
                type_selector = gr.Dropdown(
                    label="Type",
                    choices=list(TYPE_OPTIONS),
                    value=settings.default_type,
                    interactive=True,
                )
                mandatory_checkbox = gr.Checkbox(label="Mandatory", value=settings.default_is_mandatory)

    gr.Markdown("### 5. Generated JSON")
    json_output = gr.Code(label="Generated JSON", language="json", interactive=False)
    with gr.Row():
        copy_btn = gr.Button("Copy JSON")
        output_filename = gr.Textbox(label="Output Filename (optional)", placeholder="formatted_output")
        download_btn = gr.Button("Download JSON")
    copy_result = gr.Checkbox(value=False, visible=False)
    download_output = gr.File(label="Download Result")

    demo.load(fn=start_session, outputs=[document_id_state, section_id_state])

    input_text.change(
        fn=handle_input_change,
        inputs=[input_text, input_records_state],
        outputs=[input_records_state, status_msg],
    )

    process_btn.click(
        fn=handle_generate,
        inputs=[input_records_state, document_title, section_title, records_state],
        outputs=[records_state, data_table, row_selector, status_msg],
    )

    row_selector.change(
        fn=handle_row_select,
        inputs=[records_state, row_selector],
        outputs=[type_selector, mandatory_checkbox],
    )

    data_table.select(
        fn=handle_table_select,
        inputs=[records_state],
        outputs=[row_selector, type_selector, mandatory_checkbox],
    )

    type_selector.input(
        fn=handle_type_change,
        inputs=[records_state, row_selector, type_selector],
        outputs=[records_state, data_table, status_msg],
    )

    mandatory_checkbox.input(
        fn=handle_mandatory_change,
        inputs=[records_state, row_selector, mandatory_checkbox],
        outputs=[records_state, data_table, status_msg],
    )

    export_inputs = [records_state, document_id_state, document_title, section_id_state, section_title]
    for trigger in (records_state.change, document_title.change, section_title.change):
        trigger(fn=refresh_export_view, inputs=export_inputs, outputs=[json_output])

    # Rebuild the export first so the copied text carries fresh uuids and current titles.
    copy_btn.click(fn=refresh_export_view, inputs=export_inputs, outputs=[json_output]).then(
        fn=handle_copy_result,
        inputs=[json_output, copy_result],
        outputs=[status_msg],
        js=COPY_TO_CLIPBOARD_JS,
    )

    download_btn.click(
        fn=handle_download,
        inputs=export_inputs + [output_filename],
        outputs=[download_output, json_output, status_msg],
    )


def main():
    configure_logging(settings.log_level)
    demo.launch(server_name=settings.server_name, server_port=settings.server_port)


if __name__ == "__main__":
    main()
