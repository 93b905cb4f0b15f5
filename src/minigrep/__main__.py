from minigrep._entry import main

main()
