from reflect.cmdline import main

main()
