"""
NiceGUI App - Dashboard UI for graduate placements.

This module provides the login gate and the dashboard page: a searchable
province list, a Leaflet choropleth of placements per province, a hover
tooltip and a drill-down dialog. Map pointer events are hit-tested on the
server against the bundled province boundaries.
"""

import asyncio
from typing import Any, Callable, Dict, Optional

from nicegui import app, ui
from nicegui.events import GenericEventArguments

from penempatan.config import get_config
from penempatan.forge.auth import LOGIN_ERROR_MESSAGE, AccessGate
from penempatan.forge.dashboard.components import (
    DetailDialogComponent,
    LegendComponent,
    SidebarComponent,
    StatsHeaderComponent,
)
from penempatan.forge.interaction import (
    ClickDisambiguator,
    InteractionState,
    MapInteractionController,
)
from penempatan.forge.tooltip import TooltipContent, tooltip_position
from penempatan.geo.boundaries import Region, RegionIndex, load_boundaries
from penempatan.geo.choropleth import feature_style, hover_style
from penempatan.state.placement_store import PlacementStore, get_placement_store
from penempatan.utils.logger import get_logger

logger = get_logger(__name__)

LOGO_ICON = "map"


def _event_point(args: Dict[str, Any]):
    """(lat, lon, x, y) from a Leaflet mouse event, or None."""
    latlng = args.get("latlng") or {}
    point = args.get("containerPoint") or {}
    if "lat" not in latlng or "lng" not in latlng:
        return None
    return latlng["lat"], latlng["lng"], point.get("x", 0), point.get("y", 0)


class DashboardUI:
    """
    Dashboard for one browser client.

    Shares the placement store and the region index with every other
    client; hover, selection and search state are per client.
    """

    def __init__(self, store: PlacementStore, regions: RegionIndex):
        """Initialize the UI components."""
        self.config = get_config()
        self.store = store
        self.regions = regions

        self.state = InteractionState()
        self.map_stats = store.map_province_stats()
        self.sidebar = SidebarComponent(store, self.state)
        self.header = StatsHeaderComponent(store)
        self.legend = LegendComponent()
        self.detail = DetailDialogComponent(self.state)
        self.controller = MapInteractionController(
            self.state,
            people_lookup=lambda province: self.map_stats.get(province, []),
            on_change=self._on_state_change,
            disambiguator=ClickDisambiguator(
                delay=self.config.map.click_delay,
                scheduler=self._ui_scheduler
            )
        )

        # UI element references
        self.map_component = None
        self.tooltip_card = None
        self.tooltip_content: Optional[TooltipContent] = None
        self.dialog = None
        self._timer_host = None
        self._shown_detail = None
        self._layers: Dict[str, Any] = {}
        self._item_elements: Dict[str, Any] = {}
        self._hover_region: Optional[Region] = None
        self._last_selected: Optional[str] = None
        self._map_size = (self.config.map.width, self.config.map.height)

    def _ui_scheduler(self, delay: float, callback: Callable[[], None]):
        with self._timer_host:
            return ui.timer(delay, callback, once=True)

    def count_on_map(self, province: str) -> int:
        return len(self.map_stats.get(province, []))

    # Layout

    def build(self) -> None:
        """Build the dashboard layout."""
        ui.add_css('''
            .province-item { cursor: pointer; border-radius: 8px; }
            .province-item.hovered { background: #e0f2fe; }
            .province-item.active { background: #dbeafe; border: 1px solid #1e3a5f; }
            .map-tooltip { position: absolute; z-index: 1000; width: 280px; pointer-events: none; }
            .legend-color { width: 18px; height: 12px; border-radius: 2px; }
        ''')

        self._build_header()

        with ui.row().classes('w-full no-wrap gap-4 p-4'):
            with ui.column().classes('w-1/4 gap-2'):
                self._build_sidebar()
            with ui.column().classes('w-3/4 gap-2'):
                self._build_map_panel()
                self._build_legend()

        with ui.footer().classes('bg-slate-100 text-slate-600 justify-center'):
            ui.label('Dashboard Penempatan STIS')

        self._build_detail_dialog()

    def _build_header(self) -> None:
        data = self.header.get_render_data()
        with ui.header().classes('items-center justify-between bg-slate-900'):
            with ui.row().classes('items-center gap-3'):
                ui.icon(LOGO_ICON, size="2.5rem").classes("text-cyan-300")
                with ui.column().classes('gap-0'):
                    ui.label(self.config.ui.title).classes('text-xl font-bold')
                    ui.label(self.config.ui.subtitle).classes('text-sm text-gray-300')
            with ui.row().classes('items-center gap-6'):
                with ui.column().classes('items-center gap-0'):
                    ui.label(str(data['total_graduates'])).classes('text-2xl font-bold')
                    ui.label('Total Lulusan').classes('text-xs')
                with ui.column().classes('items-center gap-0'):
                    ui.label(str(data['total_regions'])).classes('text-2xl font-bold')
                    ui.label('Wilayah').classes('text-xs')
                ui.button(icon='logout', on_click=self._on_logout).props('flat round color=white')

    def _build_sidebar(self) -> None:
        ui.input(
            placeholder='Cari provinsi...',
            on_change=self._on_search
        ).props('clearable outlined dense').classes('w-full')
        with ui.scroll_area().classes('w-full h-[70vh]'):
            self._province_list()

    @ui.refreshable
    def _province_list(self) -> None:
        data = self.sidebar.get_render_data()
        self._item_elements = {}

        sticky = data['sticky']
        if sticky:
            sticky_name = sticky['name']
            card = ui.card().classes('province-item active w-full')
            card.on('click', self._on_sidebar_clear)
            self._item_elements[sticky_name] = card
            with card:
                with ui.row().classes('w-full justify-between'):
                    ui.label(sticky_name).classes('font-bold')
                    ui.badge(str(sticky['count']))
                for person in sticky['preview']:
                    with ui.column().classes('gap-0'):
                        ui.label(person['nama']).classes('text-sm')
                        ui.label(person['unit_kerja']).classes('text-xs text-gray-500')
                # .stop keeps the click from clearing the selection
                ui.button(sticky['view_all_label'], icon='open_in_full') \
                    .props('flat dense no-caps') \
                    .on('click.stop', lambda: self._on_view_all(sticky_name))

        for item in data['items']:
            classes = 'province-item w-full p-2 justify-between'
            if item['hovered']:
                classes += ' hovered'
            name = item['name']
            row = ui.row().classes(classes)
            row.on('click', lambda name=name: self._on_sidebar_select(name))
            with row:
                ui.label(name)
                ui.badge(str(item['count']))
            self._item_elements[name] = row

    def _build_map_panel(self) -> None:
        map_config = self.config.map
        with ui.element('div').classes('relative w-full'):
            self.map_component = ui.leaflet(
                center=map_config.center,
                zoom=map_config.zoom,
                options={
                    'minZoom': map_config.min_zoom,
                    'maxZoom': map_config.max_zoom,
                    'zoomControl': False,
                    'attributionControl': False,
                    'doubleClickZoom': False,
                }
            ).classes('w-full').style(f'height: {map_config.height}px')

            self.tooltip_card = ui.card().classes('map-tooltip')
            self.tooltip_card.set_visibility(False)
            self._timer_host = ui.element('div').classes('hidden')

        self.map_component.clear_layers()
        self.map_component.tile_layer(
            url_template=map_config.tile_url,
            options={
                'attribution': '&copy; OpenStreetMap',
                'subdomains': map_config.tile_subdomains,
                'maxZoom': map_config.tile_max_zoom,
            }
        )

        for region in self.regions:
            count = self.count_on_map(region.data_name)
            selected = region.data_name == self.state.selected
            self._layers[region.data_name] = self.map_component.generic_layer(
                name='geoJSON',
                args=[region.feature, {'style': feature_style(count, selected)}]
            )

        self.map_component.on('map-mousemove', self._on_map_move, throttle=0.05)
        self.map_component.on('map-mouseout', lambda _: self._set_hover_region(None))
        self.map_component.on('map-click', self._on_map_click)
        self.map_component.on('map-dblclick', self._on_map_dblclick)
        self.map_component.on('map-resize', self._on_map_resize)

        ui.timer(0.1, self._add_zoom_control, once=True)

    async def _add_zoom_control(self) -> None:
        await self.map_component.initialized()
        ui.run_javascript(
            f'L.control.zoom({{position: "bottomright"}})'
            f'.addTo(getElement({self.map_component.id}).map)'
        )

    def _build_legend(self) -> None:
        data = self.legend.get_render_data()
        with ui.card().classes('self-end'):
            ui.label(data['title']).classes('font-bold text-sm')
            for item in data['items']:
                with ui.row().classes('items-center gap-2'):
                    ui.element('div').classes('legend-color').style(f'background: {item["color"]}')
                    ui.label(item['label']).classes('text-xs')

    def _build_detail_dialog(self) -> None:
        with ui.dialog() as self.dialog, ui.card().classes('min-w-[720px]'):
            self._detail_content()
        self.dialog.on('hide', self._on_detail_closed)

    @ui.refreshable
    def _detail_content(self) -> None:
        data = self.detail.get_render_data()
        if data is None:
            return
        with ui.row().classes('w-full items-center justify-between'):
            ui.label(data['province']).classes('text-xl font-bold')
            ui.badge(data['count_label'])
            ui.button(icon='close', on_click=self.dialog.close).props('flat round')
        columns = [
            {'name': str(i), 'label': label, 'field': str(i), 'align': 'left'}
            for i, label in enumerate(data['columns'])
        ]
        rows = [{str(i): value for i, value in enumerate(row)} for row in data['rows']]
        ui.table(columns=columns, rows=rows, row_key='0').classes('w-full') \
            .props('flat dense virtual-scroll').style('max-height: 60vh')

    # Tooltip and map styling

    def _set_hover_region(self, region: Optional[Region], x: float = 0, y: float = 0) -> None:
        previous = self._hover_region
        if previous is not None and (region is None or region.data_name != previous.data_name):
            self._restyle(previous.data_name)

        self._hover_region = region
        if region is None:
            self.tooltip_content = None
            self.tooltip_card.set_visibility(False)
            self.controller.hover(None)
            return

        if previous is None or previous.data_name != region.data_name:
            layer = self._layers.get(region.data_name)
            if layer is not None:
                count = self.count_on_map(region.data_name)
                layer.run_method('setStyle', hover_style(count, region.data_name == self.state.selected))
                layer.run_method('bringToFront')
            self.tooltip_content = TooltipContent(
                name=region.data_name,
                count=self.count_on_map(region.data_name),
                x=x,
                y=y
            )
            self._render_tooltip()
            self.controller.hover(region.data_name)
        else:
            self.tooltip_content = self.tooltip_content.moved_to(x, y)

        self._place_tooltip()

    def _render_tooltip(self) -> None:
        content = self.tooltip_content
        self.tooltip_card.clear()
        with self.tooltip_card:
            with ui.row().classes('w-full justify-between items-center'):
                ui.label(content.name).classes('font-bold')
                ui.badge(content.label)
            ui.label(content.hint).classes('text-xs text-gray-500')
        self.tooltip_card.set_visibility(True)

    def _place_tooltip(self) -> None:
        content = self.tooltip_content
        tooltip_config = self.config.tooltip
        pos = tooltip_position(
            content.x,
            content.y,
            container_width=self._map_size[0],
            container_height=self._map_size[1],
            width=tooltip_config.width,
            height=tooltip_config.height,
            offset_x=tooltip_config.offset_x,
            offset_y=tooltip_config.offset_y,
            margin=tooltip_config.margin
        )
        self.tooltip_card.style(f'left: {pos["left"]}px; top: {pos["top"]}px')

    def _restyle(self, province: str) -> None:
        layer = self._layers.get(province)
        if layer is not None:
            selected = province == self.state.selected
            layer.run_method('setStyle', feature_style(self.count_on_map(province), selected))

    # Event handlers

    def _on_map_move(self, e: GenericEventArguments) -> None:
        point = _event_point(e.args)
        if point is None:
            return
        lat, lon, x, y = point
        self._set_hover_region(self.regions.hit_test(lat, lon), x, y)

    def _on_map_click(self, e: GenericEventArguments) -> None:
        point = _event_point(e.args)
        if point is None:
            return
        region = self.regions.hit_test(point[0], point[1])
        if region is not None:
            self.controller.click(region.data_name)

    def _on_map_dblclick(self, e: GenericEventArguments) -> None:
        point = _event_point(e.args)
        if point is None:
            return
        region = self.regions.hit_test(point[0], point[1])
        if region is None:
            return
        try:
            self.controller.double_click(region.data_name)
        except Exception as e:
            logger.error(f"Detail view error: {e}", exc_info=True)
            ui.notify(f'Error: {e}', type='negative')

    def _on_map_resize(self, e: GenericEventArguments) -> None:
        size = e.args.get('newSize') or {}
        if 'x' in size and 'y' in size:
            self._map_size = (size['x'], size['y'])

    def _on_search(self, e) -> None:
        self.sidebar.set_search(e.value)
        self._province_list.refresh()

    def _on_sidebar_select(self, province: str) -> None:
        self.sidebar.select(province)
        self._on_state_change(self.state)

    def _on_sidebar_clear(self) -> None:
        self.sidebar.clear_selection()
        self._on_state_change(self.state)

    def _on_view_all(self, province: str) -> None:
        try:
            self.sidebar.detail_for(province)
            self._on_state_change(self.state)
        except Exception as e:
            logger.error(f"Detail view error: {e}", exc_info=True)
            ui.notify(f'Error: {e}', type='negative')

    def _on_state_change(self, state: InteractionState) -> None:
        if state.selected != self._last_selected:
            changed = [p for p in (self._last_selected, state.selected) if p]
            self._last_selected = state.selected
            for province in changed:
                self._restyle(province)

        self._province_list.refresh()
        self._scroll_to(state.hovered)

        if state.detail is not None and state.detail is not self._shown_detail:
            self._shown_detail = state.detail
            self._detail_content.refresh()
            self.dialog.open()

    def _scroll_to(self, province: Optional[str]) -> None:
        element = self._item_elements.get(province) if province else None
        if element is not None:
            ui.run_javascript(
                f'document.getElementById("c{element.id}")'
                f'?.scrollIntoView({{behavior: "smooth", block: "center"}})'
            )

    def _on_detail_closed(self) -> None:
        self.state.close_detail()
        self._shown_detail = None

    def _on_logout(self) -> None:
        app.storage.user['authenticated'] = False
        ui.navigate.to('/login')


class LoginUI:
    """Access gate page."""

    def __init__(self, gate: AccessGate):
        self.config = get_config()
        self.gate = gate
        self.password_input = None
        self.error_label = None
        self.submit_btn = None

    def build(self) -> None:
        with ui.column().classes('absolute-center items-center'):
            with ui.card().classes('w-96 items-center p-8'):
                ui.icon(LOGO_ICON, size="4rem").classes("text-slate-700")
                ui.label('Dashboard Penempatan').classes('text-2xl font-bold')
                ui.label(self.config.ui.subtitle).classes('text-gray-500')

                self.password_input = ui.input(
                    'Kata Sandi',
                    placeholder='Masukkan kata sandi...',
                    password=True
                ).props('autofocus outlined').classes('w-full')
                self.password_input.on('keydown.enter', self._on_login)

                self.error_label = ui.label().classes('text-red-600 text-sm')
                self.error_label.set_visibility(False)

                self.submit_btn = ui.button('Masuk', icon='login', on_click=self._on_login) \
                    .classes('w-full')
                self.submit_btn.bind_enabled_from(
                    self.password_input, 'value', backward=lambda v: bool((v or '').strip())
                )

                ui.label('Akses terbatas untuk alumni STIS').classes('text-xs text-gray-400')

    async def _on_login(self) -> None:
        password = self.password_input.value or ''
        if not password.strip():
            return

        self.error_label.set_visibility(False)
        self.password_input.disable()
        self.submit_btn.props('loading')

        await asyncio.sleep(self.config.auth.verify_delay)

        try:
            if self.gate.verify(password):
                app.storage.user['authenticated'] = True
                ui.navigate.to('/')
            else:
                self.error_label.set_text(LOGIN_ERROR_MESSAGE)
                self.error_label.set_visibility(True)
        except Exception as e:
            logger.error(f"Login error: {e}", exc_info=True)
            ui.notify(f'Error: {e}', type='negative')
        finally:
            self.password_input.value = ''
            self.password_input.enable()
            self.submit_btn.props(remove='loading')


def create_app(
    store: Optional[PlacementStore] = None,
    regions: Optional[RegionIndex] = None
) -> None:
    """
    Register the dashboard pages.

    Args:
        store: Placement store (global store if not provided)
        regions: Province boundaries (loaded from config if not provided)
    """
    store = store if store is not None else get_placement_store()
    regions = regions if regions is not None else load_boundaries()
    gate = AccessGate()

    @ui.page('/login')
    def login_page():
        if app.storage.user.get('authenticated'):
            ui.navigate.to('/')
            return
        LoginUI(gate).build()

    @ui.page('/')
    def main_page():
        if not app.storage.user.get('authenticated'):
            ui.navigate.to('/login')
            return
        DashboardUI(store, regions).build()


def run_app(
    host: Optional[str] = None,
    port: Optional[int] = None,
    reload: bool = False
) -> None:
    """
    Run the NiceGUI application.

    Args:
        host: Host to bind to
        port: Port to bind to
        reload: Enable auto-reload for development
    """
    config = get_config()

    host = host or config.ui.host
    port = port or config.ui.port
    reload = reload or config.ui.reload

    logger.info(f"Starting Penempatan dashboard at http://{host}:{port}")

    ui.run(
        host=host,
        port=port,
        title=config.ui.title,
        reload=reload,
        dark=config.ui.dark_mode,
        storage_secret=config.auth.storage_secret
    )
