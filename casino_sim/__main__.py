from casino_sim.ui.cli import main

main()
