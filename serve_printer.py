import os
import sys

ROOT = os.path.dirname(os.path.abspath(__file__))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

from poem_printer.web import create_app

def main():
    """
    Serve the print page.
      python serve_printer.py
    Host/port come from PRINTER_HOST / PRINTER_PORT (default 127.0.0.1:5000).
    """
    host = os.environ.get("PRINTER_HOST", "127.0.0.1")
    port = int(os.environ.get("PRINTER_PORT", "5000"))
    app = create_app()
    print(f"[RUN] http://{host}:{port}/")
    app.run(host=host, port=port)

if __name__ == "__main__":
    main()
