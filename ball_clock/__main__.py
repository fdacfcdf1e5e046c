from ball_clock.cli import main

main()
