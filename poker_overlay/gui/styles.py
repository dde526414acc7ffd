"""QSS stylesheet constants for the overlay."""

OVERLAY_STYLESHEET = """
QWidget#overlayRoot {
    background: rgba(17, 24, 39, 215);
    border: 1px solid rgba(75, 85, 99, 180);
    border-radius: 10px;
}

QLabel {
    font-size: 12px;
    color: #e5e7eb;
}

QLabel#primaryAction {
    font-size: 22px;
    font-weight: bold;
    color: #f9fafb;
    padding: 6px 0;
}

QLabel#reasoning {
    color: #9ca3af;
    font-style: italic;
}

QLabel#statusLine {
    font-size: 10px;
    color: #6b7280;
}

QLabel[class="card"] {
    font-size: 16px;
    font-weight: bold;
    background: #f9fafb;
    color: #111827;
    border-radius: 4px;
    padding: 2px 6px;
}

QLineEdit, QComboBox, QSpinBox {
    padding: 3px 6px;
    border: 1px solid #4b5563;
    border-radius: 4px;
    background: #1f2937;
    color: #f9fafb;
}

QPushButton {
    padding: 3px 8px;
    border: 1px solid #4b5563;
    border-radius: 4px;
    background: #374151;
    color: #f9fafb;
}

QPushButton#titleButton {
    border: none;
    background: transparent;
    min-width: 22px;
}
"""
