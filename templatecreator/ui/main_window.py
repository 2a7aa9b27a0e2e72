"""Main application window for the template creator."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, Optional

from PyQt6 import QtCore, QtGui, QtWidgets
from PyQt6.QtWebEngineWidgets import QWebEngineView

from ..core import generator, storage
from ..core.errors import ConfigImportError, NotFoundError, ValidationError
from ..core.models import DEFAULT_MENU_FONT_SIZE, MENU_POSITIONS, MENU_STYLES, Page, SiteConfig, slugify
from ..core.settings import SettingsManager, app_data_dir

logger = logging.getLogger(__name__)

APP_TITLE = "Template Creator"

FONT_CHOICES = [
    "Geist",
    "Inter",
    "Roboto",
    "Open Sans",
    "Lato",
    "Montserrat",
    "Poppins",
    "Playfair Display",
]

MENU_FONT_MIN = 1
MENU_FONT_MAX = 72


def font_size_range(font_size: int) -> tuple[int, int]:
    """Spin box bounds wide enough to show ``font_size`` without clamping."""
    return MENU_FONT_MIN, max(MENU_FONT_MAX, font_size)


class ColorButton(QtWidgets.QPushButton):
    """Small helper button that opens a color dialog and shows the current color."""

    colorChanged = QtCore.pyqtSignal(str)

    def __init__(self, color: str = "#ffffff", parent: Optional[QtWidgets.QWidget] = None) -> None:
        super().__init__(parent)
        self._color = color or "#ffffff"
        self.setMinimumWidth(80)
        self.clicked.connect(self._choose_color)
        self._update_style()

    def color(self) -> str:
        return self._color

    def setColor(self, color: str, emit: bool = True) -> None:  # noqa: N802 (Qt naming)
        if not color or color == self._color:
            return
        self._color = color
        self._update_style()
        if emit:
            self.colorChanged.emit(color)

    def _choose_color(self) -> None:
        chosen = QtWidgets.QColorDialog.getColor(QtGui.QColor(self._color), self.window())
        if chosen.isValid():
            self.setColor(chosen.name())

    def _update_style(self) -> None:
        self.setText(self._color.upper())
        self.setStyleSheet(
            f"background:{self._color}; border: 1px solid rgba(148,163,184,0.6); border-radius:4px;"
            " padding: 6px;"
        )


class AddPageDialog(QtWidgets.QDialog):
    """Asks for a page name and slug; the slug follows the name until edited."""

    def __init__(self, parent: Optional[QtWidgets.QWidget] = None) -> None:
        super().__init__(parent)
        self.setWindowTitle("Add Page")
        self._slug_touched = False

        layout = QtWidgets.QFormLayout(self)
        self.name_edit = QtWidgets.QLineEdit(self)
        self.name_edit.setPlaceholderText("About Us")
        self.slug_edit = QtWidgets.QLineEdit(self)
        self.slug_edit.setPlaceholderText("about-us")
        layout.addRow("Page name", self.name_edit)
        layout.addRow("Slug", self.slug_edit)

        buttons = QtWidgets.QDialogButtonBox(
            QtWidgets.QDialogButtonBox.StandardButton.Ok | QtWidgets.QDialogButtonBox.StandardButton.Cancel,
            parent=self,
        )
        ok_button = buttons.button(QtWidgets.QDialogButtonBox.StandardButton.Ok)
        if ok_button is not None:
            ok_button.setText("Add Page")
        buttons.accepted.connect(self.accept)
        buttons.rejected.connect(self.reject)
        layout.addRow(buttons)

        self.name_edit.textEdited.connect(self._on_name_edited)
        self.slug_edit.textEdited.connect(self._on_slug_edited)

    def _on_name_edited(self, text: str) -> None:
        if not self._slug_touched:
            self.slug_edit.setText(slugify(text))

    def _on_slug_edited(self, _text: str) -> None:
        self._slug_touched = True

    def values(self) -> tuple[str, str]:
        return self.name_edit.text(), self.slug_edit.text()


class MainWindow(QtWidgets.QMainWindow):
    def __init__(
        self,
        settings: Optional[SettingsManager] = None,
        snapshot_path: Optional[Path] = None,
    ) -> None:
        super().__init__()
        self.setWindowTitle(APP_TITLE)
        self.resize(1320, 820)

        self.settings = settings or SettingsManager()
        self.snapshot_path = snapshot_path or app_data_dir() / storage.SNAPSHOT_FILENAME
        self.config: SiteConfig = storage.load_snapshot(self.snapshot_path)
        self.generated: Dict[str, str] = {}
        self._loading = False

        self._debounce = QtCore.QTimer(self)
        self._debounce.setInterval(self.settings.get_int("preview_debounce_ms", 300))
        self._debounce.setSingleShot(True)
        self._debounce.timeout.connect(self.update_preview)

        self._build_ui()
        self._build_menu()
        self._bind_events()

        self._load_config_into_form()
        self.update_window_title()
        self.update_preview()

    @property
    def page_extension(self) -> str:
        return self.settings.get("page_extension", generator.PAGE_EXTENSION) or generator.PAGE_EXTENSION

    # ------------------------------------------------------------------ UI --
    def _build_ui(self) -> None:
        splitter = QtWidgets.QSplitter(self)
        splitter.setOrientation(QtCore.Qt.Orientation.Horizontal)
        self.setCentralWidget(splitter)

        self.settings_tabs = QtWidgets.QTabWidget(self)
        self.settings_tabs.setDocumentMode(True)
        self.settings_tabs.addTab(self._build_project_tab(), "Project")
        self.settings_tabs.addTab(self._build_pages_tab(), "Pages")
        self.settings_tabs.addTab(self._build_menu_tab(), "Menu")
        self.settings_tabs.addTab(self._build_colors_tab(), "Colors")

        self.output_tabs = QtWidgets.QTabWidget(self)
        self.output_tabs.setDocumentMode(True)

        self.preview = QWebEngineView(self.output_tabs)
        self.output_tabs.addTab(self.preview, "Preview")
        self.output_tabs.addTab(self._build_export_tab(), "Export")

        splitter.addWidget(self.settings_tabs)
        splitter.addWidget(self.output_tabs)
        splitter.setSizes([420, 900])

        self.status = self.statusBar()

    def _build_project_tab(self) -> QtWidgets.QWidget:
        tab = QtWidgets.QWidget(self)
        form = QtWidgets.QFormLayout(tab)
        self.site_name_edit = QtWidgets.QLineEdit(tab)
        self.base_url_edit = QtWidgets.QLineEdit(tab)
        self.base_url_edit.setPlaceholderText("https://example.com/")
        self.font_combo = QtWidgets.QComboBox(tab)
        self.font_combo.setEditable(True)
        self.font_combo.addItems(FONT_CHOICES)
        form.addRow("Site name", self.site_name_edit)
        form.addRow("Base URL", self.base_url_edit)
        form.addRow("Font (Google Fonts)", self.font_combo)
        return tab

    def _build_pages_tab(self) -> QtWidgets.QWidget:
        tab = QtWidgets.QWidget(self)
        layout = QtWidgets.QVBoxLayout(tab)
        layout.setContentsMargins(6, 6, 6, 6)
        layout.setSpacing(6)

        self.pages_list = QtWidgets.QListWidget(tab)
        self.pages_list.setSelectionMode(QtWidgets.QAbstractItemView.SelectionMode.SingleSelection)

        btn_row = QtWidgets.QHBoxLayout()
        self.btn_add_page = QtWidgets.QPushButton("Add Page", tab)
        self.btn_remove_page = QtWidgets.QPushButton("Delete Page", tab)
        btn_row.addWidget(self.btn_add_page)
        btn_row.addWidget(self.btn_remove_page)

        self.page_box = QtWidgets.QGroupBox("Selected page", tab)
        page_form = QtWidgets.QFormLayout(self.page_box)
        self.page_title_edit = QtWidgets.QLineEdit(self.page_box)
        self.page_meta_edit = QtWidgets.QLineEdit(self.page_box)
        self.page_meta_edit.setPlaceholderText("Brief description for SEO")
        self.page_image_edit = QtWidgets.QLineEdit(self.page_box)
        self.page_image_hint = QtWidgets.QLabel(self.page_box)
        self.page_image_hint.setWordWrap(True)
        self.btn_save_page = QtWidgets.QPushButton("Save Changes", self.page_box)
        page_form.addRow("Page title", self.page_title_edit)
        page_form.addRow("Meta description", self.page_meta_edit)
        page_form.addRow("Design image", self.page_image_edit)
        page_form.addRow(self.page_image_hint)
        page_form.addRow(self.btn_save_page)
        self.page_box.setEnabled(False)

        layout.addWidget(self.pages_list, 1)
        layout.addLayout(btn_row)
        layout.addWidget(self.page_box)
        return tab

    def _build_menu_tab(self) -> QtWidgets.QWidget:
        tab = QtWidgets.QWidget(self)
        form = QtWidgets.QFormLayout(tab)
        self.menu_position_combo = QtWidgets.QComboBox(tab)
        self.menu_position_combo.addItems(list(MENU_POSITIONS))
        self.menu_style_combo = QtWidgets.QComboBox(tab)
        self.menu_style_combo.addItems(list(MENU_STYLES))
        self.auto_hide_check = QtWidgets.QCheckBox("Hide menu when scrolling down", tab)
        self.back_to_top_check = QtWidgets.QCheckBox("Add back-to-top link", tab)
        self.menu_font_spin = QtWidgets.QSpinBox(tab)
        self.menu_font_spin.setRange(*font_size_range(DEFAULT_MENU_FONT_SIZE))
        self.menu_font_spin.setSuffix(" px")
        self.menu_color_btn = ColorButton(parent=tab)
        form.addRow("Position", self.menu_position_combo)
        form.addRow("Style", self.menu_style_combo)
        form.addRow(self.auto_hide_check)
        form.addRow(self.back_to_top_check)
        form.addRow("Font size", self.menu_font_spin)
        form.addRow("Link color", self.menu_color_btn)
        return tab

    def _build_colors_tab(self) -> QtWidgets.QWidget:
        tab = QtWidgets.QWidget(self)
        form = QtWidgets.QFormLayout(tab)
        self.primary_btn = ColorButton(parent=tab)
        self.secondary_btn = ColorButton(parent=tab)
        self.bg_btn = ColorButton(parent=tab)
        form.addRow("Primary", self.primary_btn)
        form.addRow("Secondary", self.secondary_btn)
        form.addRow("Background", self.bg_btn)
        return tab

    def _build_export_tab(self) -> QtWidgets.QWidget:
        tab = QtWidgets.QWidget(self)
        layout = QtWidgets.QVBoxLayout(tab)
        layout.setContentsMargins(6, 6, 6, 6)

        top_row = QtWidgets.QHBoxLayout()
        self.file_combo = QtWidgets.QComboBox(tab)
        self.language_label = QtWidgets.QLabel(tab)
        top_row.addWidget(QtWidgets.QLabel("File", tab))
        top_row.addWidget(self.file_combo, 1)
        top_row.addWidget(self.language_label)

        self.code_view = QtWidgets.QPlainTextEdit(tab)
        self.code_view.setReadOnly(True)
        self.code_view.setFont(QtGui.QFontDatabase.systemFont(QtGui.QFontDatabase.SystemFont.FixedFont))
        self.code_view.setPlaceholderText("Press Generate to build the site files.")

        btn_row = QtWidgets.QHBoxLayout()
        self.btn_generate = QtWidgets.QPushButton("Generate", tab)
        self.btn_copy = QtWidgets.QPushButton("Copy", tab)
        self.btn_zip = QtWidgets.QPushButton("Download ZIP…", tab)
        self.btn_folder = QtWidgets.QPushButton("Export to Folder…", tab)
        for btn in (self.btn_generate, self.btn_copy, self.btn_zip, self.btn_folder):
            btn_row.addWidget(btn)

        layout.addLayout(top_row)
        layout.addWidget(self.code_view, 1)
        layout.addLayout(btn_row)
        return tab

    def _build_menu(self) -> None:
        bar = self.menuBar()
        if bar is None:
            bar = QtWidgets.QMenuBar(self)
            self.setMenuBar(bar)

        file_menu = bar.addMenu("&File")
        self.act_generate = QtGui.QAction("Generate", self)
        self.act_generate.setShortcut(QtGui.QKeySequence("Ctrl+G"))
        self.act_import = QtGui.QAction("Import Config…", self)
        self.act_export_config = QtGui.QAction("Export Config…", self)
        self.act_quit = QtGui.QAction("Quit", self)
        if file_menu is not None:
            file_menu.addAction(self.act_generate)
            file_menu.addSeparator()
            file_menu.addActions([self.act_import, self.act_export_config])
            file_menu.addSeparator()
            file_menu.addAction(self.act_quit)

        help_menu = bar.addMenu("&Help")
        self.act_about = QtGui.QAction("About", self)
        if help_menu is not None:
            help_menu.addAction(self.act_about)

    def _bind_events(self) -> None:
        self.site_name_edit.textEdited.connect(self._on_site_name)
        self.base_url_edit.textEdited.connect(self._on_base_url)
        self.font_combo.currentTextChanged.connect(self._on_font)

        self.pages_list.currentRowChanged.connect(self._on_page_selection_changed)
        self.btn_add_page.clicked.connect(self.add_page)
        self.btn_remove_page.clicked.connect(self.remove_page)
        self.btn_save_page.clicked.connect(self.save_page)

        self.menu_position_combo.currentTextChanged.connect(self._on_menu_position)
        self.menu_style_combo.currentTextChanged.connect(self._on_menu_style)
        self.auto_hide_check.toggled.connect(self._on_auto_hide)
        self.back_to_top_check.toggled.connect(self._on_back_to_top)
        self.menu_font_spin.valueChanged.connect(self._on_menu_font_size)
        self.menu_color_btn.colorChanged.connect(self._on_menu_color)

        self.primary_btn.colorChanged.connect(lambda c: self._on_palette("primary", c))
        self.secondary_btn.colorChanged.connect(lambda c: self._on_palette("secondary", c))
        self.bg_btn.colorChanged.connect(lambda c: self._on_palette("bg", c))

        self.file_combo.currentTextChanged.connect(self.display_file)
        self.btn_generate.clicked.connect(self.generate_all)
        self.btn_copy.clicked.connect(self.copy_current_file)
        self.btn_zip.clicked.connect(self.download_zip)
        self.btn_folder.clicked.connect(self.export_site)

        self.act_generate.triggered.connect(self.generate_all)
        self.act_import.triggered.connect(self.import_config_dialog)
        self.act_export_config.triggered.connect(self.export_config_dialog)
        self.act_quit.triggered.connect(self.close)
        self.act_about.triggered.connect(self.show_about)

    # ------------------------------------------------------------- Form sync --
    def _load_config_into_form(self) -> None:
        self._loading = True
        try:
            cfg = self.config
            self.site_name_edit.setText(cfg.project.site_name)
            self.base_url_edit.setText(cfg.project.base_url)
            self.font_combo.setCurrentText(cfg.project.font)
            self.menu_position_combo.setCurrentText(cfg.menu.position)
            self.menu_style_combo.setCurrentText(cfg.menu.style)
            self.auto_hide_check.setChecked(cfg.menu.auto_hide)
            self.back_to_top_check.setChecked(cfg.menu.back_to_top)
            self.menu_font_spin.setRange(*font_size_range(cfg.menu.font_size))
            self.menu_font_spin.setValue(cfg.menu.font_size)
            self.menu_color_btn.setColor(cfg.menu.color, emit=False)
            self.primary_btn.setColor(cfg.colors.primary, emit=False)
            self.secondary_btn.setColor(cfg.colors.secondary, emit=False)
            self.bg_btn.setColor(cfg.colors.bg, emit=False)
        finally:
            self._loading = False
        self._refresh_pages_list()

    def _changed(self, preview: bool = True) -> None:
        if self._loading:
            return
        self.save_state()
        if preview:
            self._debounce.start()

    def save_state(self) -> None:
        try:
            storage.save_snapshot(self.snapshot_path, self.config)
        except OSError as exc:
            logger.warning("Failed to save state to %s: %s", self.snapshot_path, exc)
            if self.status is not None:
                self.status.showMessage(f"Could not save state: {exc}", 5000)

    def _on_site_name(self, text: str) -> None:
        self.config.project.site_name = text
        self.update_window_title()
        self._changed(preview=True)

    def _on_base_url(self, text: str) -> None:
        self.config.project.base_url = text
        self._changed(preview=False)

    def _on_font(self, text: str) -> None:
        if self._loading or not text.strip():
            return
        self.config.project.font = text.strip()
        self._changed()

    def _on_menu_position(self, value: str) -> None:
        if self._loading:
            return
        self.config.menu.position = value
        self._changed()

    def _on_menu_style(self, value: str) -> None:
        if self._loading:
            return
        self.config.menu.style = value
        self._changed()

    def _on_auto_hide(self, checked: bool) -> None:
        if self._loading:
            return
        self.config.menu.auto_hide = checked
        self._changed()

    def _on_back_to_top(self, checked: bool) -> None:
        if self._loading:
            return
        self.config.menu.back_to_top = checked
        self._changed()

    def _on_menu_font_size(self, value: int) -> None:
        if self._loading:
            return
        self.config.menu.font_size = value
        self._changed()

    def _on_menu_color(self, color: str) -> None:
        self.config.menu.color = color
        self._changed()

    def _on_palette(self, key: str, color: str) -> None:
        setattr(self.config.colors, key, color)
        self._changed()

    # --------------------------------------------------------------- Pages --
    def _refresh_pages_list(self) -> None:
        self.pages_list.blockSignals(True)
        self.pages_list.clear()
        selected_row = -1
        for row, page in enumerate(self.config.pages):
            item = QtWidgets.QListWidgetItem(f"{page.name}  ({page.filename(self.page_extension)})")
            item.setData(QtCore.Qt.ItemDataRole.UserRole, page.id)
            self.pages_list.addItem(item)
            if page.id == self.config.current_page_id:
                selected_row = row
        self.pages_list.setCurrentRow(selected_row)
        self.pages_list.blockSignals(False)
        self.btn_remove_page.setEnabled(len(self.config.pages) > 1)
        self._load_page_into_editor()

    def _load_page_into_editor(self) -> None:
        page: Optional[Page] = None
        if self.config.current_page_id is not None:
            try:
                page = self.config.get_page(self.config.current_page_id)
            except NotFoundError:
                page = None
        self.page_box.setEnabled(page is not None)
        if page is None:
            self.page_box.setTitle("Select a page to start editing")
            for edit in (self.page_title_edit, self.page_meta_edit, self.page_image_edit):
                edit.clear()
            self.page_image_hint.clear()
            return
        self.page_box.setTitle(f"Editing: {page.name}")
        self.page_title_edit.setText(page.display_title)
        self.page_meta_edit.setText(page.meta_desc)
        self.page_image_edit.setText(page.image_path)
        self.page_image_edit.setPlaceholderText(f"{page.slug}.jpg")
        self.page_image_hint.setText(
            f"Default: {page.slug}.jpg. The image should sit next to the generated "
            f".{self.page_extension} files, or use a full http(s) URL."
        )

    def _on_page_selection_changed(self, row: int) -> None:
        item = self.pages_list.item(row) if row >= 0 else None
        if item is None:
            return
        page_id = item.data(QtCore.Qt.ItemDataRole.UserRole)
        try:
            self.config.select_page(int(page_id))
        except NotFoundError:
            logger.warning("Page list out of sync; id %s not found", page_id)
            return
        self._load_page_into_editor()
        self._changed()

    def add_page(self) -> None:
        dialog = AddPageDialog(self)
        if dialog.exec() != QtWidgets.QDialog.DialogCode.Accepted:
            return
        name, slug = dialog.values()
        try:
            page = self.config.add_page(name, slug)
        except ValidationError as exc:
            QtWidgets.QMessageBox.warning(self, "Add Page", str(exc))
            return
        self.config.current_page_id = page.id
        self._refresh_pages_list()
        self._changed()

    def remove_page(self) -> None:
        item = self.pages_list.currentItem()
        if item is None:
            return
        page_id = int(item.data(QtCore.Qt.ItemDataRole.UserRole))
        answer = QtWidgets.QMessageBox.question(
            self, "Delete Page", "Are you sure you want to delete this page?"
        )
        if answer != QtWidgets.QMessageBox.StandardButton.Yes:
            return
        try:
            self.config.delete_page(page_id)
        except (ValidationError, NotFoundError) as exc:
            QtWidgets.QMessageBox.warning(self, "Delete Page", str(exc))
            return
        self._refresh_pages_list()
        self._changed()

    def save_page(self) -> None:
        if self.config.current_page_id is None:
            return
        try:
            self.config.update_page(
                self.config.current_page_id,
                title=self.page_title_edit.text(),
                meta_desc=self.page_meta_edit.text(),
                image_name=self.page_image_edit.text(),
            )
        except NotFoundError as exc:
            QtWidgets.QMessageBox.warning(self, "Save Page", str(exc))
            return
        self._changed()
        if self.status is not None:
            self.status.showMessage("Saved!", 1500)

    # ---------------------------------------------------------- Generation --
    def update_preview(self) -> None:
        html = generator.generate_preview(self.config)
        base_dir = self.settings.get("last_export_dir") or str(Path.home())
        self.preview.setHtml(html, QtCore.QUrl.fromLocalFile(str(Path(base_dir)) + "/"))

    def generate_all(self) -> None:
        self.generated = generator.generate_all(self.config, self.page_extension)
        current = self.config.current_file
        if current not in self.generated:
            current = next(iter(self.generated))
        self.file_combo.blockSignals(True)
        self.file_combo.clear()
        self.file_combo.addItems(list(self.generated))
        self.file_combo.blockSignals(False)
        self.file_combo.setCurrentText(current)
        self.display_file(current)
        self.output_tabs.setCurrentIndex(1)
        if self.status is not None:
            self.status.showMessage(f"Generated {len(self.generated)} files", 2000)

    def display_file(self, filename: str) -> None:
        if filename not in self.generated:
            return
        self.config.current_file = filename
        self.code_view.setPlainText(self.generated[filename])
        self.language_label.setText(generator.language_for(filename))
        self.save_state()

    def copy_current_file(self) -> None:
        code = self.generated.get(self.config.current_file)
        if code is None:
            if self.status is not None:
                self.status.showMessage("Nothing to copy yet. Generate first.", 3000)
            return
        clipboard = QtWidgets.QApplication.clipboard()
        if clipboard is None:
            QtWidgets.QMessageBox.warning(self, "Copy", "Failed to copy: clipboard unavailable")
            return
        clipboard.setText(code)
        if self.status is not None:
            self.status.showMessage("Copied!", 1500)

    def _ensure_generated(self) -> None:
        if not self.generated:
            self.generate_all()

    def download_zip(self) -> None:
        self._ensure_generated()
        start_dir = self.settings.get("last_export_dir") or str(Path.home())
        default = str(Path(start_dir) / generator.archive_name(self.config.project.site_name))
        path, _ = QtWidgets.QFileDialog.getSaveFileName(self, "Download ZIP", default, "Zip Archives (*.zip)")
        if not path:
            return
        try:
            generator.build_archive(self.generated, path)
        except (OSError, ValueError) as exc:
            logger.error("Failed to write archive %s: %s", path, exc)
            QtWidgets.QMessageBox.warning(self, "Download ZIP", f"Failed to create archive:\n{exc}")
            return
        self.settings.set("last_export_dir", str(Path(path).parent))
        if self.status is not None:
            self.status.showMessage(f"Saved {Path(path).name}", 4000)

    def export_site(self) -> None:
        start_dir = self.settings.get("last_export_dir") or str(Path.home())
        out_dir = QtWidgets.QFileDialog.getExistingDirectory(self, "Export Site To…", start_dir)
        if not out_dir:
            return
        try:
            generator.render_site(self.config, out_dir, self.page_extension)
        except (OSError, ValueError) as exc:
            logger.error("Failed to export site to %s: %s", out_dir, exc)
            QtWidgets.QMessageBox.warning(self, "Export", f"Failed to export site:\n{exc}")
            return
        self.settings.set("last_export_dir", out_dir)
        if self.status is not None:
            self.status.showMessage(f"Exported site to {out_dir}", 5000)

    # ------------------------------------------------------- Config files --
    def import_config_dialog(self) -> None:
        path, _ = QtWidgets.QFileDialog.getOpenFileName(self, "Import Config", "", "JSON (*.json);;All files (*)")
        if not path:
            return
        try:
            storage.import_config(path, self.config)
        except ConfigImportError as exc:
            logger.error("Failed to import configuration from %s: %s", path, exc)
            QtWidgets.QMessageBox.critical(self, "Import", f"Failed to import configuration: {exc}")
            return
        self.generated = {}
        self._load_config_into_form()
        self.save_state()
        self.update_window_title()
        self.update_preview()
        QtWidgets.QMessageBox.information(self, "Import", "Configuration imported successfully!")

    def export_config_dialog(self) -> None:
        path, _ = QtWidgets.QFileDialog.getSaveFileName(
            self, "Export Config", storage.CONFIG_FILENAME, "JSON (*.json)"
        )
        if not path:
            return
        try:
            storage.export_config(path, self.config)
        except OSError as exc:
            logger.error("Failed to export configuration to %s: %s", path, exc)
            QtWidgets.QMessageBox.warning(self, "Export Config", f"Failed to export configuration:\n{exc}")
            return
        if self.status is not None:
            self.status.showMessage(f"Saved {Path(path).name}", 4000)

    # ---------------------------------------------------------------- Misc --
    def show_about(self) -> None:
        QtWidgets.QMessageBox.information(
            self,
            "About",
            f"{APP_TITLE}\n\nConfigure a small multi-page site and generate PHP pages, "
            "a stylesheet, a script and an .htaccess file.",
        )

    def update_window_title(self) -> None:
        name = self.config.project.site_name or "Untitled"
        self.setWindowTitle(f"{APP_TITLE} — {name}")

    def closeEvent(self, event: QtGui.QCloseEvent) -> None:  # noqa: N802 (Qt override)
        self._debounce.stop()
        self.save_state()
        super().closeEvent(event)
