from rdcalc.cli import rdcalc

rdcalc(prog_name="rdcalc")
