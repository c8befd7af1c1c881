"""Textual CSS for the picker."""

TUI_CSS = """
Screen {
    layout: vertical;
}

#top-row {
    height: 3fr;
    layout: horizontal;
}

#configurations {
    width: 1fr;
}

#instances {
    width: 2fr;
}

#history {
    height: 2fr;
}

ConfigurationPanel, InstancePanel, HistoryPanel {
    border: round $panel-lighten-2;
    padding: 0 1;
}

ConfigurationPanel.-focused, InstancePanel.-focused, HistoryPanel.-focused {
    border: round #5f5fd7;
}

StatusBar {
    dock: bottom;
    height: 1;
}
"""
