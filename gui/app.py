# gui/app.py
# -*- coding: utf-8 -*-
from __future__ import annotations

import tkinter as tk
from tkinter import ttk, messagebox, filedialog
from pathlib import Path
import json
import threading
from queue import Queue

import matplotlib
matplotlib.use('TkAgg')
from matplotlib.backends.backend_tkagg import FigureCanvasTkAgg
from matplotlib.figure import Figure

# Модель
from heatexchange.errors import HeatExchangeError
from heatexchange.export import safe_csv_filename
from heatexchange.params import CalculationInput, Gas, Material, OperatingParameters, default_input
from heatexchange.schemas import input_from_dict, input_to_dict
from heatexchange.storage import CalculationService, CalculationStore
from heatexchange.visualization import plot_delta, plot_profile, profile_table, summary_lines


# ----------------------------- Руководство (тексты) -----------------------------
USER_GUIDE_SECTIONS = {
"quickstart": """
БЫСТРЫЙ СТАРТ

1) Задайте геометрию слоя: высота H (м) и площадь сечения S (м²).
2) Расходы: материал G_m (кг/ч), газ V_g (м³/ч при объёмной теплоёмкости, иначе кг/ч).
3) Температуры входа: материал t′ (сверху), газ T′ (снизу).
4) Теплоёмкости и объёмный коэффициент теплоотдачи α_v.
5) «Рассчитать». Результат сохраняется в список расчётов автоматически.

Экспорт: Файл → «Экспорт CSV» (профиль по высоте) или «Экспорт отчёта» (графики + текст).
""",

"parameters": """
ПАРАМЕТРЫ

• H, S, G_m, V_g, α_v должны быть > 0, иначе расчёт не выполняется.
• Число шагов N ≥ 1 (по умолчанию 400) — только разрешение профиля.
• Теплоёмкость газа C_g:
   – флажок «объёмная» включён: C_g в кДж/(м³·°C), V_g в м³/ч;
   – выключен: C_g в Дж/(кг·°C), V_g в кг/ч.
• Свойства материала и газа (плотность, вязкость, …) сохраняются вместе
  с расчётом для справки и в формулы не входят.
""",

"theory": """
КАК УСТРОЕНА МОДЕЛЬ

• Теплоёмкости потоков на 1 м² сечения:
   Cm = (G_m/3600)·C_m / S,   Cg = (V_g/3600)·C_g / S  (C_g·1000 для объёмной).
• m = Cm / Cg, Y = y/H (0 — низ, 1 — верх).
• Общий случай:
   θ_м(Y) = T′ + (t′−T′)(1−e^{−(1−m)α_vHY/Cm}) / (1 − m·e^{−(1−m)α_vH/Cm}),
   θ_г(Y) = T′ + m·(θ_м − T′).
• При |m − 1| < 1e-6 используется отдельная формула для m = 1.
• Q = |Cm·S·(θ_м(0) − t′)|,  КПД = Q / (Cmin·|t′ − T′|)·100 %.
""",

"limits": """
ОГРАНИЧЕНИЯ

• Стационарный режим, одномерная модель (без радиальной неравномерности).
• Свойства потоков постоянны по высоте.
• При 1 − m·e^{…} ≈ 0 профиль не определён (значения inf/NaN) — выводится предупреждение.
• КПД не ограничивается диапазоном 0–100 %.
""",
}


# ----------------------------- UI helpers -----------------------------
class ParameterFrame(ttk.LabelFrame):
    def __init__(self, parent, title, **kwargs):
        super().__init__(parent, text=title, **kwargs)
        self.vars, self.entries = {}, {}

    def add_field(self, label, var_name, default_value, row,
                  tooltip=None, unit="", field_type="float"):
        if field_type == "bool":
            var = tk.BooleanVar(value=bool(default_value))
            entry = ttk.Checkbutton(self, text=label, variable=var)
            entry.grid(row=row, column=0, columnspan=3, sticky="w", padx=5, pady=2)
        else:
            ttk.Label(self, text=f"{label}:").grid(row=row, column=0, sticky="w", padx=5, pady=2)
            if field_type == "float":
                var = tk.DoubleVar(value=default_value)
            elif field_type == "int":
                var = tk.IntVar(value=default_value)
            else:
                var = tk.StringVar(value=default_value or "")
            width = 10 if field_type in ("float", "int") else 22
            entry = ttk.Entry(self, textvariable=var, width=width); entry.grid(row=row, column=1, padx=5, pady=2)
        self.vars[var_name] = var
        self.entries[var_name] = entry
        if unit:
            ttk.Label(self, text=unit).grid(row=row, column=2, sticky="w", padx=2, pady=2)
        if tooltip:
            self._create_tooltip(entry, tooltip)
        return var

    def _create_tooltip(self, widget, text):
        def on_enter(e):
            tip = tk.Toplevel(); tip.wm_overrideredirect(True)
            tip.wm_geometry(f"+{e.x_root + 10}+{e.y_root + 10}")
            ttk.Label(tip, text=text, background="#ffffe0", relief="solid", borderwidth=1).pack()
            widget.tooltip = tip

        def on_leave(e):
            if hasattr(widget, 'tooltip'):
                widget.tooltip.destroy()
                del widget.tooltip
        widget.bind("<Enter>", on_enter); widget.bind("<Leave>", on_leave)

    def get_values(self):
        return {name: var.get() for name, var in self.vars.items()}

    def set_values(self, values_dict):
        for name, value in values_dict.items():
            if name in self.vars:
                self.vars[name].set("" if value is None else value)


# ------------------------------ Main GUI ------------------------------
class HeatExchangerGUI:
    def __init__(self, root, service: CalculationService | None = None):
        self.root = root
        self.root.title("Теплообменник с движущимся слоем v1.0")
        self.root.geometry("1300x850")
        self.service = service or CalculationService(CalculationStore())
        self.update_queue = Queue()
        self.calculation_thread = None
        self.current = None
        self.setup_ui()
        self.refresh_saved()
        self.root.after(100, self.process_queue)

    # ---------- UI ----------
    def setup_ui(self):
        self.create_menu()
        main_paned = ttk.PanedWindow(self.root, orient=tk.HORIZONTAL)
        main_paned.pack(fill=tk.BOTH, expand=True, padx=5, pady=5)
        left_frame = ttk.Frame(main_paned, width=400)
        main_paned.add(left_frame, weight=0)
        right_frame = ttk.Frame(main_paned)
        main_paned.add(right_frame, weight=1)

        canvas = tk.Canvas(left_frame, width=380)
        scrollbar = ttk.Scrollbar(left_frame, orient="vertical", command=canvas.yview)
        scrollable_frame = ttk.Frame(canvas)
        scrollable_frame.bind("<Configure>", lambda e: canvas.configure(scrollregion=canvas.bbox("all")))
        canvas.create_window((0, 0), window=scrollable_frame, anchor="nw")
        canvas.configure(yscrollcommand=scrollbar.set)
        self.create_parameter_panels(scrollable_frame)

        button_frame = ttk.Frame(left_frame); button_frame.pack(side=tk.BOTTOM, fill=tk.X, pady=5)
        row1 = ttk.Frame(button_frame); row1.pack(fill=tk.X)
        self.run_button = ttk.Button(row1, text="▶ Рассчитать", command=self.run_calculation); self.run_button.pack(side=tk.LEFT, padx=5, pady=2)
        row2 = ttk.Frame(button_frame); row2.pack(fill=tk.X)
        ttk.Button(row2, text="💾 Сохранить конфиг", command=self.save_config).pack(side=tk.LEFT, padx=5, pady=2)
        ttk.Button(row2, text="📂 Загрузить конфиг", command=self.load_config).pack(side=tk.LEFT, padx=5, pady=2)
        canvas.pack(side=tk.LEFT, fill=tk.BOTH, expand=True); scrollbar.pack(side=tk.RIGHT, fill=tk.Y)
        left_frame.pack_propagate(False)

        self.notebook = ttk.Notebook(right_frame); self.notebook.pack(fill=tk.BOTH, expand=True)
        self.plots_frame = ttk.Frame(self.notebook); self.notebook.add(self.plots_frame, text="Графики")
        ttk.Label(self.plots_frame, text="Выполните расчёт для отображения графиков", font=("Arial", 14)).pack(expand=True)
        self.results_frame = ttk.Frame(self.notebook); self.notebook.add(self.results_frame, text="Результаты")
        self.saved_frame = ttk.Frame(self.notebook); self.notebook.add(self.saved_frame, text="Сохранённые расчёты")
        self.create_saved_tab()

        self.status_var = tk.StringVar(value="Готов к работе")
        ttk.Label(self.root, textvariable=self.status_var, relief=tk.SUNKEN, anchor=tk.W).pack(side=tk.BOTTOM, fill=tk.X)

    def create_menu(self):
        menubar = tk.Menu(self.root); self.root.config(menu=menubar)
        file_menu = tk.Menu(menubar, tearoff=0); menubar.add_cascade(label="Файл", menu=file_menu)
        file_menu.add_command(label="Загрузить конфигурацию", command=self.load_config)
        file_menu.add_command(label="Сохранить конфигурацию", command=self.save_config)
        file_menu.add_separator()
        file_menu.add_command(label="Экспорт CSV", command=self.export_csv)
        file_menu.add_command(label="Экспорт отчёта", command=self.export_results)
        file_menu.add_separator(); file_menu.add_command(label="Выход", command=self.root.quit)
        calc_menu = tk.Menu(menubar, tearoff=0); menubar.add_cascade(label="Расчёт", menu=calc_menu)
        calc_menu.add_command(label="Рассчитать", command=self.run_calculation)
        help_menu = tk.Menu(menubar, tearoff=0); menubar.add_cascade(label="Справка", menu=help_menu)
        help_menu.add_command(label="Руководство", command=self.open_user_guide)
        help_menu.add_command(label="О программе", command=self.show_about)

    def create_parameter_panels(self, parent):
        self.param_frames = {}
        p = default_input().parameters

        info = ParameterFrame(parent, "Расчёт"); info.pack(fill=tk.X, padx=5, pady=5)
        info.add_field("Название", "name", "", 0, "Пусто — имя по дате и времени", field_type="str")
        info.add_field("Описание", "description", "", 1, field_type="str")
        self.param_frames['info'] = info

        geom = ParameterFrame(parent, "Геометрия слоя"); geom.pack(fill=tk.X, padx=5, pady=5)
        geom.add_field("Высота H", "height", p.height, 0, unit="м")
        geom.add_field("Площадь сечения S", "cross_section", p.cross_section, 1, unit="м²")
        self.param_frames['geometry'] = geom

        flows = ParameterFrame(parent, "Расходы"); flows.pack(fill=tk.X, padx=5, pady=5)
        flows.add_field("Материал G_m", "material_flow_rate", p.material_flow_rate, 0, unit="кг/ч")
        flows.add_field("Газ V_g", "gas_flow_rate", p.gas_flow_rate, 1, unit="м³/ч | кг/ч")
        self.param_frames['flows'] = flows

        temps = ParameterFrame(parent, "Температуры входа"); temps.pack(fill=tk.X, padx=5, pady=5)
        temps.add_field("Материал t′ (сверху)", "material_inlet_temp", p.material_inlet_temp, 0, unit="°C")
        temps.add_field("Газ T′ (снизу)", "gas_inlet_temp", p.gas_inlet_temp, 1, unit="°C")
        self.param_frames['temperatures'] = temps

        heat = ParameterFrame(parent, "Теплоёмкости и теплообмен"); heat.pack(fill=tk.X, padx=5, pady=5)
        heat.add_field("C_m материала", "material_specific_heat", p.material_specific_heat, 0, unit="Дж/(кг·°C)")
        heat.add_field("C_g газа", "gas_specific_heat", p.gas_specific_heat, 1, unit="кДж/(м³·°C) | Дж/(кг·°C)")
        heat.add_field("C_g объёмная (кДж/(м³·°C))", "is_gas_heat_capacity_volumetric",
                       p.is_gas_heat_capacity_volumetric, 2, field_type="bool")
        heat.add_field("α_v", "volumetric_heat_transfer_coeff", p.volumetric_heat_transfer_coeff, 3, unit="Вт/(м³·°C)")
        heat.add_field("Число шагов N", "calculation_steps", p.calculation_steps, 4, "Разбиение по высоте", "", "int")
        self.param_frames['heat'] = heat

        mat = ParameterFrame(parent, "Материал (справочно)"); mat.pack(fill=tk.X, padx=5, pady=5)
        mat.add_field("Название", "name", "", 0, field_type="str")
        mat.add_field("Плотность", "density", 0.0, 1, unit="кг/м³")
        mat.add_field("Теплоёмкость", "specific_heat", 0.0, 2, unit="Дж/(кг·°C)")
        mat.add_field("Размер частиц", "particle_size", 0.0, 3, unit="мм")
        mat.add_field("Порозность", "porosity", 0.0, 4)
        self.param_frames['material'] = mat

        gas = ParameterFrame(parent, "Газ (справочно)"); gas.pack(fill=tk.X, padx=5, pady=5)
        gas.add_field("Название", "name", "", 0, field_type="str")
        gas.add_field("Плотность", "density", 0.0, 1, unit="кг/м³")
        gas.add_field("Теплоёмкость", "specific_heat", 0.0, 2)
        gas.add_field("Вязкость", "viscosity", 0.0, 3, unit="Па·с")
        gas.add_field("Теплопроводность", "thermal_conductivity", 0.0, 4, unit="Вт/(м·°C)")
        self.param_frames['gas'] = gas

        TOOLTIPS = {
          "geometry": {
            "height": "Высота слоя H, м. Должна быть > 0.",
            "cross_section": "Площадь поперечного сечения аппарата S, м². Должна быть > 0.",
          },
          "flows": {
            "material_flow_rate": "Массовый расход материала, кг/ч.",
            "gas_flow_rate": "Расход газа: м³/ч при объёмной C_g, иначе кг/ч.",
          },
          "heat": {
            "volumetric_heat_transfer_coeff": "Объёмный коэффициент теплоотдачи α_v, Вт/(м³·°C).",
          },
        }
        for block, tips in TOOLTIPS.items():
            frame = self.param_frames.get(block)
            if not frame:
                continue
            for var_name, text in tips.items():
                if var_name in frame.entries:
                    frame._create_tooltip(frame.entries[var_name], text)

    def create_saved_tab(self):
        cols = ("id", "name", "created")
        self.saved_tree = ttk.Treeview(self.saved_frame, columns=cols, show="headings", height=20)
        for col, title, width in zip(cols, ("№", "Название", "Создан"), (50, 400, 160)):
            self.saved_tree.heading(col, text=title); self.saved_tree.column(col, width=width, anchor="w")
        self.saved_tree.pack(fill=tk.BOTH, expand=True, padx=10, pady=5)
        self.saved_tree.bind("<Double-1>", lambda e: self.open_saved())
        buttons = ttk.Frame(self.saved_frame); buttons.pack(fill=tk.X, padx=10, pady=5)
        ttk.Button(buttons, text="Открыть", command=self.open_saved).pack(side=tk.LEFT, padx=5)
        ttk.Button(buttons, text="Удалить", command=self.delete_saved).pack(side=tk.LEFT, padx=5)
        ttk.Button(buttons, text="Экспорт CSV", command=self.export_saved_csv).pack(side=tk.LEFT, padx=5)
        ttk.Button(buttons, text="Обновить", command=self.refresh_saved).pack(side=tk.LEFT, padx=5)

    # ---------- params ----------
    def get_input(self) -> CalculationInput:
        info = self.param_frames['info'].get_values()
        values = {}
        for block in ('geometry', 'flows', 'temperatures', 'heat'):
            values.update(self.param_frames[block].get_values())
        values['calculation_steps'] = int(values['calculation_steps'])
        values['is_gas_heat_capacity_volumetric'] = bool(values['is_gas_heat_capacity_volumetric'])
        m = self.param_frames['material'].get_values()
        g = self.param_frames['gas'].get_values()
        return CalculationInput(
            name=info['name'] or None,
            description=info['description'] or None,
            material=Material(**{**m, 'name': m['name'] or None}),
            gas=Gas(**{**g, 'name': g['name'] or None}),
            parameters=OperatingParameters(**values),
        )

    def set_input(self, calc_input: CalculationInput):
        self.param_frames['info'].set_values({"name": calc_input.name, "description": calc_input.description})
        params = vars(calc_input.parameters)
        for block in ('geometry', 'flows', 'temperatures', 'heat'):
            self.param_frames[block].set_values(params)
        self.param_frames['material'].set_values(vars(calc_input.material))
        self.param_frames['gas'].set_values(vars(calc_input.gas))

    # ---------- run ----------
    def run_calculation(self):
        if self.calculation_thread and self.calculation_thread.is_alive():
            messagebox.showwarning("Предупреждение", "Расчёт уже выполняется!"); return
        try:
            calc_input = self.get_input()
        except (tk.TclError, ValueError, TypeError) as e:
            messagebox.showerror("Ошибка", f"Некорректное значение в полях ввода:\n{e}"); return
        self.run_button.config(state=tk.DISABLED)
        self.status_var.set("Выполняется расчёт...")
        self.calculation_thread = threading.Thread(target=self._run_worker, args=(calc_input,), daemon=True)
        self.calculation_thread.start()

    def _run_worker(self, calc_input: CalculationInput):
        try:
            calc = self.service.calculate(calc_input)
            self.update_queue.put(('finished', calc))
        except HeatExchangeError as e:
            self.update_queue.put(('invalid', str(e)))
        except Exception as e:
            import traceback
            self.update_queue.put(('error', f"{str(e)}\n\n{traceback.format_exc()}"))

    # ---------- messaging ----------
    def process_queue(self):
        while not self.update_queue.empty():
            msg_type, data = self.update_queue.get_nowait()
            self.run_button.config(state=tk.NORMAL)
            if msg_type == 'finished':
                self.status_var.set(f"Расчёт завершён и сохранён: {data.name}")
                self.show_calculation(data)
                self.refresh_saved()
            elif msg_type == 'invalid':
                self.status_var.set("Расчёт не выполнен")
                messagebox.showwarning("Проверьте данные", data)
            elif msg_type == 'error':
                self.status_var.set("Ошибка расчёта")
                messagebox.showerror("Ошибка", f"Ошибка при расчёте:\n{data}")
        self.root.after(100, self.process_queue)

    # ---------- results ----------
    def show_calculation(self, calc):
        self.current = calc
        self.notebook.select(self.plots_frame)
        for w in self.plots_frame.winfo_children():
            w.destroy()
        fig = Figure(figsize=(11, 6), dpi=90)
        ax1 = fig.add_subplot(121)
        ax2 = fig.add_subplot(122, sharey=ax1)
        plot_profile(ax1, calc.result)
        plot_delta(ax2, calc.result)
        fig.suptitle(calc.name)
        fig.tight_layout()
        canvas = FigureCanvasTkAgg(fig, self.plots_frame)
        canvas.draw()
        canvas.get_tk_widget().pack(fill=tk.BOTH, expand=True)
        self.update_results_tab(calc)

    def update_results_tab(self, calc):
        for w in self.results_frame.winfo_children():
            w.destroy()
        text = tk.Text(self.results_frame, wrap=tk.WORD, font=("Courier", 10))
        scroll = ttk.Scrollbar(self.results_frame, command=text.yview)
        text.configure(yscrollcommand=scroll.set)
        report = "=" * 60 + f"\n{calc.name}\n" + "=" * 60 + "\n\n"
        if calc.description:
            report += calc.description + "\n\n"
        report += "Итоговые показатели:\n" + "\n".join(summary_lines(calc.result)) + "\n\n"
        report += "Профиль по высоте (выборочные точки):\n" + "\n".join(profile_table(calc.result, rows=9)) + "\n"
        text.insert(tk.END, report)
        text.config(state=tk.DISABLED)
        text.pack(side=tk.LEFT, fill=tk.BOTH, expand=True, padx=5, pady=5)
        scroll.pack(side=tk.RIGHT, fill=tk.Y)

    # ---------- saved ----------
    def refresh_saved(self):
        for item in self.saved_tree.get_children():
            self.saved_tree.delete(item)
        try:
            calcs = self.service.list_recent()
        except OSError as e:
            self.status_var.set(f"Список расчётов недоступен: {e}")
            return
        for calc in calcs:
            self.saved_tree.insert("", tk.END, iid=str(calc.id),
                                   values=(calc.id, calc.name, calc.created_at.strftime("%d.%m.%Y %H:%M")))

    def _selected_id(self):
        sel = self.saved_tree.selection()
        if not sel:
            messagebox.showwarning("Предупреждение", "Выберите расчёт в списке")
            return None
        return int(sel[0])

    def open_saved(self):
        calc_id = self._selected_id()
        if calc_id is None:
            return
        try:
            calc = self.service.get(calc_id)
        except HeatExchangeError as e:
            messagebox.showerror("Ошибка", str(e))
            self.refresh_saved()
            return
        self.set_input(calc.input)
        self.show_calculation(calc)

    def delete_saved(self):
        calc_id = self._selected_id()
        if calc_id is None:
            return
        if not messagebox.askyesno("Удаление", f"Удалить расчёт №{calc_id}?"):
            return
        try:
            self.service.delete(calc_id)
        except HeatExchangeError as e:
            messagebox.showerror("Ошибка", str(e))
        self.refresh_saved()

    def export_saved_csv(self):
        calc_id = self._selected_id()
        if calc_id is not None:
            self._export_csv(calc_id)

    def export_csv(self):
        if not self.current:
            messagebox.showwarning("Предупреждение", "Нет результатов для экспорта")
            return
        self._export_csv(self.current.id)

    def _export_csv(self, calc_id: int):
        try:
            calc = self.service.get(calc_id)
            _, payload = self.service.export_csv(calc_id)
        except HeatExchangeError as e:
            messagebox.showerror("Ошибка", str(e))
            return
        target = filedialog.asksaveasfilename(title="Экспорт CSV", initialfile=safe_csv_filename(calc.name),
                                              defaultextension=".csv",
                                              filetypes=[("CSV files", "*.csv"), ("All files", "*.*")])
        if not target:
            return
        try:
            Path(target).write_bytes(payload)
        except OSError as e:
            messagebox.showerror("Ошибка", f"Не удалось сохранить CSV:\n{e}")
            return
        self.status_var.set(f"CSV сохранён: {Path(target).name}")

    # ---------- save/load/export ----------
    def save_config(self):
        filename = filedialog.asksaveasfilename(title="Сохранить конфигурацию", defaultextension=".json",
                                                filetypes=[("JSON files", "*.json"), ("All files", "*.*")])
        if not filename:
            return
        try:
            config = input_to_dict(self.get_input())
        except (tk.TclError, ValueError, TypeError) as e:
            messagebox.showerror("Ошибка", f"Некорректное значение в полях ввода:\n{e}")
            return
        with open(filename, 'w', encoding='utf-8') as f:
            json.dump(config, f, indent=2, ensure_ascii=False)
        self.status_var.set(f"Конфигурация сохранена: {Path(filename).name}")

    def load_config(self):
        filename = filedialog.askopenfilename(title="Загрузить конфигурацию",
                                              filetypes=[("JSON files", "*.json"), ("All files", "*.*")])
        if not filename:
            return
        try:
            with open(filename, 'r', encoding='utf-8') as f:
                config = json.load(f)
            self.set_input(input_from_dict(config))
            self.status_var.set(f"Конфигурация загружена: {Path(filename).name}")
        except (OSError, ValueError) as e:
            messagebox.showerror("Ошибка", f"Ошибка загрузки конфигурации:\n{e}")

    def export_results(self):
        if not self.current:
            messagebox.showwarning("Предупреждение", "Нет результатов для экспорта")
            return

        folder = filedialog.askdirectory(title="Выберите папку для экспорта")
        if not folder:
            return

        try:
            from heatexchange.visualization import render_profile_ru
            output_dir = Path(folder)
            render_profile_ru(self.current.result, output_dir, title=self.current.name)
            messagebox.showinfo("Готово", f"Результаты экспортированы в:\n{output_dir}")
        except OSError as e:
            messagebox.showerror("Ошибка", f"Ошибка экспорта:\n{e}")

    def show_about(self):
        messagebox.showinfo("О программе",
                            "Теплообменник с движущимся слоем v1.0\n\n"
                            "Стационарный профиль температур материала и газа в противоточном аппарате\n"
                            "по аналитическому решению.")

    # ---------- Руководство ----------
    def open_user_guide(self):
        win = tk.Toplevel(self.root)
        win.title("Руководство пользователя")
        win.geometry("800x600")

        nb = ttk.Notebook(win); nb.pack(fill=tk.BOTH, expand=True)

        def _add_tab(title, text):
            fr = ttk.Frame(nb); nb.add(fr, text=title)
            txt = tk.Text(fr, wrap=tk.WORD, font=("Segoe UI", 10), padx=8, pady=8)
            txt.insert(tk.END, text.strip() + "\n"); txt.config(state=tk.DISABLED)
            y = ttk.Scrollbar(fr, command=txt.yview); txt.configure(yscrollcommand=y.set)
            txt.pack(side=tk.LEFT, fill=tk.BOTH, expand=True); y.pack(side=tk.RIGHT, fill=tk.Y)

        _add_tab("Быстрый старт", USER_GUIDE_SECTIONS["quickstart"])
        _add_tab("Параметры", USER_GUIDE_SECTIONS["parameters"])
        _add_tab("Как устроена модель", USER_GUIDE_SECTIONS["theory"])
        _add_tab("Ограничения", USER_GUIDE_SECTIONS["limits"])


# ------------------------------ entry ------------------------------
def main():
    root = tk.Tk()
    app = HeatExchangerGUI(root)
    root.mainloop()

if __name__ == "__main__":
    main()
