from countinggame.app import run

run()
