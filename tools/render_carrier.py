"""Quick harness for the carrier stage using synthetic peak frequencies."""
from __future__ import annotations

import argparse
import logging

import numpy as np

from carriersynth.config import load_params
from carriersynth.dsp import CarrierEngine, CarrierParams, signals


def main() -> None:
    parser = argparse.ArgumentParser(description="Offline carrier synthesis smoke test")
    parser.add_argument("--params", help="JSON parameter file (defaults used when omitted)")
    parser.add_argument("--track", choices=["constant", "glide", "random"], default="glide")
    parser.add_argument("--freq", type=float, default=200.0, help="Constant or glide start frequency in Hz")
    parser.add_argument("--end-freq", type=float, default=2000.0, help="Glide end / random upper frequency in Hz")
    parser.add_argument("--frames", type=int, default=200, help="Number of audio frames")
    parser.add_argument("--seed", type=int, default=None, help="Seed for the random track")
    parser.add_argument("--plot", help="Save a PNG of channel 0 to this path")
    parser.add_argument("-v", "--verbose", action="store_true")
    args = parser.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO)

    params = load_params(args.params) if args.params else CarrierParams()
    engine = CarrierEngine(params)
    n_chan = params.n_chan

    if args.track == "constant":
        peak_freq = signals.constant_track(args.freq, n_chan, args.frames)
    elif args.track == "glide":
        peak_freq = signals.glide_track(args.freq, args.end_freq, n_chan, args.frames)
    else:
        peak_freq = signals.random_track(args.freq, args.end_freq, n_chan, args.frames, seed=args.seed)

    carrier, idx_audio = engine.process(peak_freq)

    print("FT rate (Hz):", engine.timing.rate_ft)
    print("Carrier shape:", carrier.shape)
    print("Carrier range:", float(carrier.min()), "-", float(carrier.max()))
    print("Mean carrier level:", float(np.mean(carrier)))
    print("Last audio frame used:", int(idx_audio[-1]))

    if args.plot:
        from carriersynth.plotting import carrier_figure

        fig = carrier_figure(carrier, peak_freq, idx_audio, engine.timing)
        fig.savefig(args.plot)
        print("Saved plot to", args.plot)


if __name__ == "__main__":
    main()
