"""Source files generated into the new project."""

from eletract.models import TemplateFlavor

SHELL_DIR = "electron"
SHELL_ENTRY_FILE = "electron/electron.js"

DEV_SERVER_URL = "http://localhost:3000"

WINDOW_WIDTH = 800
WINDOW_HEIGHT = 600

SHELL_ENTRY_SOURCE = f"""\
// Modules to control application life and create native browser window
const {{ app, BrowserWindow }} = require('electron');

function createWindow() {{
  // Create the browser window.
  const mainWindow = new BrowserWindow({{
    width: {WINDOW_WIDTH},
    height: {WINDOW_HEIGHT}
  }});

  // and load the React app on localhost.
  mainWindow.loadURL('{DEV_SERVER_URL}');
}}

app.whenReady().then(() => {{
  createWindow();
  app.on('activate', () => {{
    if (BrowserWindow.getAllWindows().length === 0) createWindow();
  }});
}});

app.on('window-all-closed', () => {{
  if (process.platform !== 'darwin') app.quit();
}});
"""

APP_ENTRY_JS = """\
import React from 'react';

function App() {
  return (
    <div className="App">
      <h1>Hello from React and Electron</h1>
    </div>
  );
}

export default App;
"""

APP_ENTRY_TSX = """\
import React from 'react';

function App(): JSX.Element {
  return (
    <div className="App">
      <h1>Hello from React and Electron</h1>
    </div>
  );
}

export default App;
"""


def app_entry_candidates() -> list[str]:
    """UI entry files to look for, TypeScript first."""
    return [
        f"src/App{TemplateFlavor.TYPESCRIPT.app_entry_suffix}",
        f"src/App{TemplateFlavor.JAVASCRIPT.app_entry_suffix}",
    ]


def app_entry_file(flavor: TemplateFlavor) -> str:
    """Relative path of the UI entry component for a flavor."""
    return f"src/App{flavor.app_entry_suffix}"


def app_entry_source(flavor: TemplateFlavor) -> str:
    """Placeholder UI entry component for a flavor."""
    if flavor is TemplateFlavor.TYPESCRIPT:
        return APP_ENTRY_TSX
    return APP_ENTRY_JS
