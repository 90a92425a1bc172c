from setenv.cli import main

raise SystemExit(main())
