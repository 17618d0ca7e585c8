#!/usr/bin/env python
"""
Convenience script to run the SLA Monitoring Dashboard.

Usage:
    python run_ui.py

The dashboard asks for the records API URL on first start and remembers it
in the settings file (see SLA_SETTINGS_FILE).
"""

import subprocess
import sys
from pathlib import Path

def main():
    """Run the Streamlit UI."""

    app_path = Path(__file__).parent / "sla_monitor" / "ui" / "streamlit_app.py"

    if not app_path.exists():
        print(f"❌ Error: Streamlit app not found at {app_path}")
        sys.exit(1)

    print("🚀 Starting SLA Monitoring Dashboard...")
    print(f"📍 App: {app_path}")
    print("")
    print("The UI will open in your browser at: http://localhost:8501")
    print("Press Ctrl+C to stop the server")
    print("")

    try:
        subprocess.run(
            [sys.executable, "-m", "streamlit", "run", str(app_path)],
            check=False
        )
    except KeyboardInterrupt:
        print("\n✅ Streamlit server stopped")
        sys.exit(0)
    except OSError as e:
        print(f"❌ Error running Streamlit: {e}")
        sys.exit(1)

if __name__ == "__main__":
    main()
