"""Central CSS definitions for quick-pick."""

# Modal base styles - all modals inherit these
MODAL_CSS = """
/* Modal base positioning */
.modal-base {
    align: center middle;
}

/* Dialog container base */
.modal-base #dialog {
    height: auto;
    max-height: 90%;
    padding: 1 2;
    background: $surface;
    border: round $surface-lighten-1;
    overflow-y: auto;
}

.modal-md #dialog {
    width: 60vw;
    min-width: 50;
    max-width: 65;
}
"""

# Common UI patterns shared across components
COMMON_CSS = """
/* Dialog title - centered, muted */
.dialog-title {
    text-align: center;
    width: 100%;
    margin-bottom: 1;
    color: $text-muted;
}

/* Dialog hint text - bottom of modals */
.dialog-hint {
    text-align: center;
    color: $text-disabled;
    margin-top: 1;
}

/* Empty list placeholder */
.empty-list {
    color: $text-disabled;
    padding: 2;
    text-align: center;
}
"""

# Combined base CSS for import
BASE_CSS = MODAL_CSS + COMMON_CSS
