"""
SplitBills GUI
- Track expenses shared with each friend, record what you paid directly,
  and see who owes whom.
- Labels in English or Arabic (Settings menu).
- Export an Excel report: a summary sheet plus one sheet per friend.

Run:
  python split_bills_gui.py

Dependencies:
  pip install openpyxl
(Tkinter ships with most Python distributions; on some Linux you may need: sudo apt-get install python3-tk)
"""
from __future__ import annotations
import logging

try:
    import tkinter as tk
except ModuleNotFoundError:
    tk = None

from config import load_settings


def main():
    """Main entry point for the application"""
    settings = load_settings()
    logging.basicConfig(level=settings.log_level, format="%(asctime)s %(levelname)s %(message)s")
    if tk is None:
        raise RuntimeError(
            'tkinter is not available. Install it (e.g., on Ubuntu: sudo apt-get install python3-tk) '
            'and re-run to use the GUI.'
        )

    from main_app import SplitBillsApp

    root = tk.Tk()
    SplitBillsApp(root, settings)
    root.mainloop()


if __name__ == "__main__":
    main()
