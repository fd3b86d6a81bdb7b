APP_NAME = "Student Expense Tracker"
APP_WIDTH = 520
APP_HEIGHT = 820
DB_FILE = "expenses.db"

OTHER_CATEGORY = "Other"

COLORS = {
    "dark_brown":   "#3E2723",
    "sand_brown":   "#D7CCC8",
    "accent_brown": "#8D6E63",
    "light_sand":   "#EFEBE9",
    "dark_text":    "#1B0000",
    "delete":       "#FF6B6B",
}

PIE_CHART_COLORS = [
    "#FF6B6B", "#4ECDC4", "#45B7D1", "#FFA07A",
    "#98D8C8", "#F7DC6F", "#BB8FCE", "#85C1E2",
]

DEFAULT_SETTINGS = [
    ("appearance_mode", "system"),
    ("currency_symbol", "$"),
]

CSV_HEADER = ["ID", "Category", "Amount", "Note"]
