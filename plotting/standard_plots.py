"""
    Модуль plotting/standard_plots.py.
    Состав:
    Классы: нет.
    Функции: plot_dynamics, plot_phasor_diagram.
"""
from __future__ import annotations

from typing import Optional

import numpy as np
import matplotlib
import matplotlib.pyplot as plt

from core.operating_point import OperatingPoint
from core.parameters import GeneratorParameters
from core.results import SimulationResults

matplotlib.rcParams['font.size'] = 9
matplotlib.rcParams['axes.grid'] = True
matplotlib.rcParams['figure.dpi'] = 150


def _save_and_close(fig, save_path: Optional[str]) -> None:
    """Сохраняет рисунок (если задан путь) и закрывает его."""
    if save_path:
        fig.savefig(save_path, dpi=200, bbox_inches='tight')
        print(f"\n  Plot saved: {save_path}")
    plt.close(fig)


def plot_dynamics(res: SimulationResults, save_path: Optional[str] = None):
    """Rotor angle, speed, torques, EMFs and terminal power versus time."""

    t = res.t

    fig, axes = plt.subplots(3, 2, figsize=(14, 12))
    fig.suptitle(f'Simulation results\n({res.scenario_name})',
                 fontsize=13, fontweight='bold')

    axes[0, 0].plot(t, np.degrees(res.delta), 'b-', lw=0.8)
    axes[0, 0].set(xlabel='Time, s', ylabel='delta, deg',
                   title='Rotor angle')

    axes[0, 1].plot(t, res.omega, 'b-', lw=0.8)
    axes[0, 1].axhline(y=1.0, color='r', lw=0.8, ls='--', label='synchronous')
    axes[0, 1].set(xlabel='Time, s', ylabel='omega, pu',
                   title='Rotor speed')
    axes[0, 1].legend(fontsize=8)

    if res.Te is not None:
        axes[1, 0].plot(t, res.Te, 'b-', lw=0.8, label='Te')
    if res.Tm is not None:
        axes[1, 0].plot(t, res.Tm, 'r--', lw=0.8, label='Tm')
    axes[1, 0].set(xlabel='Time, s', ylabel='Torque, pu',
                   title='Electrical and mechanical torque')
    axes[1, 0].legend(fontsize=8)

    axes[1, 1].plot(t, res.Ed_p, 'b-', lw=0.8, label="Ed'")
    axes[1, 1].plot(t, res.Eq_p, 'r-', lw=0.8, label="Eq'")
    axes[1, 1].plot(t, res.Ed_pp, 'b--', lw=0.8, label="Ed''")
    axes[1, 1].plot(t, res.Eq_pp, 'r--', lw=0.8, label="Eq''")
    axes[1, 1].set(xlabel='Time, s', ylabel='EMF, pu',
                   title='Transient and subtransient EMFs')
    axes[1, 1].legend(fontsize=8)

    if res.P_elec is not None and res.Q_elec is not None:
        axes[2, 0].plot(t, res.P_elec, 'b-', lw=0.8, label='P')
        axes[2, 0].plot(t, res.Q_elec, 'g-', lw=0.8, label='Q')
        axes[2, 0].legend(fontsize=8)
    axes[2, 0].set(xlabel='Time, s', ylabel='Power, pu',
                   title='Terminal power')

    if res.Id is not None and res.Iq is not None:
        axes[2, 1].plot(t, res.Id, 'b-', lw=0.8, label='Id')
        axes[2, 1].plot(t, res.Iq, 'r-', lw=0.8, label='Iq')
        axes[2, 1].legend(fontsize=8)
    axes[2, 1].set(xlabel='Time, s', ylabel='Current, pu',
                   title='Stator currents (dq)')

    plt.tight_layout(rect=[0, 0, 1, 0.94])
    _save_and_close(fig, save_path)
    return fig


def plot_phasor_diagram(
    op: OperatingPoint,
    params: GeneratorParameters,
    save_path: Optional[str] = None,
):
    """Steady-state phasor diagram: V, I, the voltage drops and the q-axis."""

    V = op.V
    I = op.I
    drop_r = params.Rs * I
    drop_x = 1j * params.Xq * I
    E_q = V + drop_r + drop_x

    fig, ax = plt.subplots(figsize=(7, 7))
    fig.suptitle('Steady-state phasor diagram', fontsize=13, fontweight='bold')

    def arrow(start: complex, end: complex, color: str, label: str):
        ax.annotate(
            '', xy=(end.real, end.imag), xytext=(start.real, start.imag),
            arrowprops=dict(arrowstyle='->', color=color, lw=1.5),
        )
        ax.plot([], [], color=color, label=label)

    arrow(0j, V, 'b', f'V = {abs(V):.3f} pu')
    arrow(0j, I, 'r', f'I = {abs(I):.3f} pu')
    arrow(V, V + drop_r, 'g', 'Rs I')
    arrow(V + drop_r, E_q, 'm', 'j Xq I')

    # q-ось направлена по углу ротора delta
    q_axis = max(abs(E_q), abs(V)) * 1.1 * np.exp(1j * op.delta)
    ax.plot([0, q_axis.real], [0, q_axis.imag], 'k--', lw=0.8,
            label=f'q-axis, delta = {np.degrees(op.delta):.1f} deg')

    lim = max(abs(E_q), abs(V), abs(I)) * 1.2
    ax.set_xlim(-0.2 * lim, lim)
    ax.set_ylim(-0.6 * lim, lim)
    ax.set_aspect('equal')
    ax.set(xlabel='Re, pu', ylabel='Im, pu')
    ax.legend(fontsize=8, loc='upper left')

    plt.tight_layout(rect=[0, 0, 1, 0.94])
    _save_and_close(fig, save_path)
    return fig
